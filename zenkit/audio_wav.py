"""PCM WAV (RIFF) encoding and decoding."""

from __future__ import annotations

import struct

from .audio import Audio, AudioDecoder, AudioEncoder
from .errors import DecodeError

_HEAD = struct.Struct("<4sI4s4sIHHIIHH")
_CHUNK = struct.Struct("<4sI")
_U16 = struct.Struct("<H")


class _Reader:
    def __init__(self, data):
        self._data = data
        self.position = 0

    def read(self, layout, message):
        end = self.position + layout.size
        if end > len(self._data):
            raise DecodeError(message)
        values = layout.unpack_from(self._data, self.position)
        self.position = end
        return values

    def forward(self, count):
        self.position += count

    def take(self, count):
        chunk = self._data[self.position:self.position + count]
        self.position += count
        return chunk


class AudioWavDecoder(AudioDecoder):
    """Decodes PCM WAV data."""

    def decode(self, data):
        data = bytes(data)
        reader = _Reader(data)
        (riff_id, _riff_size, audio_type, fmt_id, fmt_size, format_tag,
         channels, sps, _bps, block_align, _bits) = reader.read(_HEAD, "invalid wav data")

        if fmt_size == 18:
            (cb_size,) = reader.read(_U16, "error wav format")
            reader.forward(cb_size)
        elif fmt_size != 16:
            raise DecodeError("invalid wave format size")

        if format_tag != 1:
            raise DecodeError("not PCM wav format")
        if riff_id != b"RIFF" or audio_type != b"WAVE" or fmt_id != b"fmt ":
            raise DecodeError("invalid wav format")

        data_id, data_size = reader.read(_CHUNK, "invalid wav data info")
        if data_id != b"data":
            if reader.position + data_size > len(data):
                raise DecodeError("invalid fact data")
            reader.forward(data_size)
            data_id, data_size = reader.read(_CHUNK, "invalid wav data info")

        if data_id != b"data":
            raise DecodeError("invalid data format")
        if block_align == 0:
            raise DecodeError("invalid block align")

        length = data_size // block_align
        size = length * block_align
        if reader.position + size > len(data):
            raise DecodeError("invalid data size")

        audio = Audio.create(channels, block_align, sps, length)
        audio.data[:] = reader.take(size)
        return audio


class AudioWavEncoder(AudioEncoder):
    """Encodes audio as PCM WAV data."""

    def encode(self, audio):
        size = audio.size()
        head = _HEAD.pack(
            b"RIFF",
            (size + (44 - 8)) & 0xFFFFFFFF,
            b"WAVE",
            b"fmt ",
            16,
            1,
            audio.channel & 0xFFFF,
            audio.frequency & 0xFFFFFFFF,
            (audio.frequency * audio.sample_size) & 0xFFFFFFFF,
            audio.sample_size & 0xFFFF,
            (audio.sample_size * 8) & 0xFFFF,
        )
        return head + _CHUNK.pack(b"data", size & 0xFFFFFFFF) + bytes(audio.data)


class AudioWavCoder(AudioWavDecoder, AudioWavEncoder):
    """Both encodes and decodes PCM WAV data."""