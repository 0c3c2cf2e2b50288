import pytest

from zenkit.color import Pixel
from zenkit.errors import DecodeError
from zenkit.image import Image
from zenkit.image_raw import ImageRawCoder, ImageRawDecoder, ImageRawEncoder


def test_header_bytes():
    image = Image.create_with_data(Pixel.RGB, 2, 1, bytes([1, 2, 3, 4, 5, 6]))
    encoded = ImageRawEncoder().encode(image)
    assert encoded[:16] == b"jaii\x00\x00\x00\x02\x00\x00\x00\x01\x00\x03\x00\x00"
    assert encoded[16:] == bytes([1, 2, 3, 4, 5, 6])


@pytest.mark.parametrize("fmt", [Pixel.GREY, Pixel.GA, Pixel.RGB, Pixel.RGBA])
def test_round_trip(fmt):
    coder = ImageRawCoder()
    raw = bytes(i % 256 for i in range(3 * 4 * int(fmt)))
    image = Image.create_with_data(fmt, 3, 4, raw)
    decoded = coder.decode(coder.encode(image))
    assert decoded == image


def test_short_header():
    with pytest.raises(DecodeError):
        ImageRawDecoder().decode(b"jaii")


def test_zero_format_rejected():
    image = Image.create(Pixel.RGB, 1, 1)
    encoded = bytearray(ImageRawEncoder().encode(image))
    encoded[12:14] = b"\x00\x00"
    with pytest.raises(DecodeError):
        ImageRawDecoder().decode(encoded)


def test_unknown_format_rejected():
    image = Image.create(Pixel.RGB, 1, 1)
    encoded = bytearray(ImageRawEncoder().encode(image))
    encoded[12:14] = b"\x00\x09"
    with pytest.raises(DecodeError):
        ImageRawDecoder().decode(encoded)


def test_truncated_pixels():
    image = Image.create(Pixel.RGBA, 2, 2)
    encoded = ImageRawEncoder().encode(image)
    with pytest.raises(DecodeError):
        ImageRawDecoder().decode(encoded[:-1])


def test_trailing_bytes_ignored():
    image = Image.create_with_byte(Pixel.GA, 2, 1, 7)
    encoded = ImageRawEncoder().encode(image) + b"extra"
    assert ImageRawDecoder().decode(encoded) == image