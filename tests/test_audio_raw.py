import pytest

from zenkit.audio import Audio
from zenkit.audio_raw import AudioRawCoder, AudioRawDecoder, AudioRawEncoder
from zenkit.errors import DecodeError


def _sample_audio():
    audio = Audio.create(2, 4, 44100, 3)
    audio.data[:] = bytes(range(audio.size()))
    return audio


def test_encode_header_layout():
    audio = _sample_audio()
    encoded = AudioRawEncoder().encode(audio)
    assert encoded[:4] == b"jaiw"
    assert int.from_bytes(encoded[4:6], "big") == audio.channel
    assert int.from_bytes(encoded[6:8], "big") == audio.sample_size
    assert int.from_bytes(encoded[8:12], "big") == audio.frequency
    assert int.from_bytes(encoded[12:16], "big") == audio.sample_count
    assert encoded[16:] == bytes(audio.data)


def test_round_trip():
    audio = _sample_audio()
    coder = AudioRawCoder()
    decoded = coder.decode(coder.encode(audio))
    assert decoded == audio


def test_decode_ignores_trailing_bytes():
    audio = _sample_audio()
    decoded = AudioRawDecoder().decode(AudioRawEncoder().encode(audio) + b"xyz")
    assert decoded.data == audio.data


def test_short_header():
    with pytest.raises(DecodeError, match="failed to read header"):
        AudioRawDecoder().decode(b"jaiw\x00")


def test_zero_size_rejected():
    encoded = AudioRawEncoder().encode(Audio.create(1, 1, 8000, 0))
    with pytest.raises(DecodeError, match="invalid file format"):
        AudioRawDecoder().decode(encoded)


def test_truncated_content():
    encoded = AudioRawEncoder().encode(_sample_audio())
    with pytest.raises(DecodeError, match="invalid file content"):
        AudioRawDecoder().decode(encoded[:-1])