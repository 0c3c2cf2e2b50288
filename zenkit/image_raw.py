"""A simple raw bitmap container.

Layout: 16-byte header followed by the pixel bytes in order.  The header
is the signature ``jaii``, width (u32), height (u32), pixel format (u16)
and two unused bytes, all big-endian.
"""

from __future__ import annotations

import struct

from .color import Pixel
from .errors import DecodeError
from .image import Image, ImageDecoder, ImageEncoder

SIGNATURE = b"jaii"
_HEADER = struct.Struct(">4sIIHH")


class ImageRawDecoder(ImageDecoder):
    """Decodes the raw bitmap container."""

    def decode(self, data):
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise DecodeError("invalid image raw")
        _sign, width, height, format_value, _kept = _HEADER.unpack_from(data)
        try:
            format = Pixel(format_value)
        except ValueError:
            raise DecodeError("invalid format") from None
        if format == Pixel.NONE:
            raise DecodeError("invalid format")
        size = width * height * int(format)
        if len(data) < _HEADER.size + size:
            raise DecodeError("too few data length")
        image = Image.create(format, width, height)
        image.data[:] = data[_HEADER.size:_HEADER.size + size]
        return image


class ImageRawEncoder(ImageEncoder):
    """Encodes an image into the raw bitmap container."""

    def encode(self, image):
        head = _HEADER.pack(
            SIGNATURE,
            image.width & 0xFFFFFFFF,
            image.height & 0xFFFFFFFF,
            int(image.format) & 0xFFFF,
            0,
        )
        return head + bytes(image.data)


class ImageRawCoder(ImageRawDecoder, ImageRawEncoder):
    """Both encodes and decodes the raw bitmap container."""