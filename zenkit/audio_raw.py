"""A simple raw audio container.

Layout: 16-byte header followed by the sample bytes.  The header is the
signature ``jaiw`` then channel (u16), sample size (u16), frequency (u32)
and sample count (u32), all big-endian.
"""

from __future__ import annotations

import struct

from .audio import Audio, AudioDecoder, AudioEncoder
from .errors import DecodeError

SIGNATURE = b"jaiw"
_HEADER = struct.Struct(">4sHHII")


class AudioRawDecoder(AudioDecoder):
    """Decodes the raw audio container."""

    def decode(self, data):
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise DecodeError("failed to read header")
        _sign, channel, sample_size, frequency, sample_count = _HEADER.unpack_from(data)
        size = (sample_size * sample_count) & 0xFFFFFFFF
        if size == 0:
            raise DecodeError("invalid file format")
        if len(data) < _HEADER.size + size:
            raise DecodeError("invalid file content")
        audio = Audio.create(channel, sample_size, frequency, sample_count)
        audio.data[:] = data[_HEADER.size:_HEADER.size + size]
        return audio


class AudioRawEncoder(AudioEncoder):
    """Encodes audio into the raw audio container."""

    def encode(self, audio):
        head = _HEADER.pack(
            SIGNATURE,
            audio.channel & 0xFFFF,
            audio.sample_size & 0xFFFF,
            audio.frequency & 0xFFFFFFFF,
            audio.sample_count & 0xFFFFFFFF,
        )
        return head + bytes(audio.data)


class AudioRawCoder(AudioRawEncoder, AudioRawDecoder):
    """Both encodes and decodes the raw audio container."""