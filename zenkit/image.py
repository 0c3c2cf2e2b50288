"""In-memory bitmap images and the decoder/encoder interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .color import Color3b, Pixel


def _lane(buf, offset, stride, count):
    """Bytes at ``offset`` of each of ``count`` pixels ``stride`` bytes apart."""
    return buf[offset:stride * count:stride]


@dataclass
class Image:
    """A block of pixels stored row by row in the layout given by ``format``."""

    format: Pixel = Pixel.NONE
    width: int = 0
    height: int = 0
    data: bytearray = field(default_factory=bytearray)

    @classmethod
    def create(cls, format, width, height):
        """Create an image with every byte zero."""
        return cls.create_with_byte(format, width, height, 0)

    @classmethod
    def create_with_data(cls, format, width, height, data):
        """Create an image from pixel bytes; return None when ``data`` is None."""
        if data is None:
            return None
        format = Pixel(format)
        size = width * height * int(format)
        buf = bytes(data)
        if len(buf) < size:
            raise ValueError(f"need {size} bytes of pixel data, got {len(buf)}")
        return cls(format, width, height, bytearray(buf[:size]))

    @classmethod
    def create_with_byte(cls, format, width, height, byte):
        """Create an image with every byte set to ``byte``."""
        format = Pixel(format)
        size = width * height * int(format)
        return cls(format, width, height, bytearray([byte]) * size)

    def size(self):
        """Number of bytes in the pixel buffer."""
        return len(self.data)

    @property
    def _count(self):
        return self.width * self.height

    @property
    def _stride(self):
        return int(self.format)

    def _write(self, offset, values):
        self.data[offset:self.size():self._stride] = values

    def _source(self, format, data):
        buf = bytes(data)
        need = self._count * int(format)
        if len(buf) < need:
            raise ValueError(f"need {need} bytes of pixel data, got {len(buf)}")
        return buf

    def fill_byte(self, byte):
        """Set every byte of the buffer to ``byte``."""
        self.data[:] = bytes([byte]) * self.size()

    def fill_alpha(self, byte):
        """Set the alpha channel; a grey image takes the value as its only channel."""
        if self.format == Pixel.GREY:
            self.fill_byte(byte)
        elif self.format in (Pixel.GA, Pixel.RGBA):
            self._write(self._stride - 1, bytes([byte]) * self._count)

    def fill_grey(self, byte):
        """Set every colour channel to ``byte``, leaving alpha alone."""
        if self.format in (Pixel.GREY, Pixel.RGB):
            self.fill_byte(byte)
        elif self.format == Pixel.GA:
            self._write(0, bytes([byte]) * self._count)
        elif self.format == Pixel.RGBA:
            for offset in range(3):
                self._write(offset, bytes([byte]) * self._count)

    def fill_rgb(self, rgb):
        """Set the colour channels; grey images take the green channel."""
        if self.format in (Pixel.GREY, Pixel.GA):
            self.fill_grey(rgb.g)
        elif self.format in (Pixel.RGB, Pixel.RGBA):
            for offset, value in enumerate((rgb.r, rgb.g, rgb.b)):
                self._write(offset, bytes([value]) * self._count)

    def fill_rgba(self, rgba):
        """Set colour and alpha channels as far as the format has them."""
        if self.format == Pixel.GREY:
            self.fill_alpha(rgba.a)
        elif self.format == Pixel.RGB:
            self.fill_rgb(Color3b(rgba.r, rgba.g, rgba.b))
        elif self.format == Pixel.GA:
            self.data[:] = bytes([rgba.g, rgba.a]) * self._count
        elif self.format == Pixel.RGBA:
            self.data[:] = bytes([rgba.r, rgba.g, rgba.b, rgba.a]) * self._count

    def copy(self, format, data):
        """Copy colour and alpha from same-sized pixel data in ``format``.

        Return True if the pixels were converted, False if the formats
        cannot be combined.
        """
        format = Pixel(format)
        if Pixel.NONE in (self.format, format):
            return False
        if format == self.format:
            self.data[:] = self._source(format, data)[:self.size()]
            return True
        if Pixel.RGB in (self.format, format):
            return self.copy_color(format, data)
        if self.format == Pixel.GREY:
            if format == Pixel.RGBA:
                return self.copy_alpha(format, data)
            if format == Pixel.GA:
                return self.copy_color(format, data)
        if self.format == Pixel.GA:
            if format == Pixel.RGBA:
                src = self._source(format, data)
                self._write(0, _lane(src, 1, 4, self._count))
                self._write(1, _lane(src, 3, 4, self._count))
                return True
            if format == Pixel.GREY:
                return self.copy_color(format, data)
        if self.format == Pixel.RGBA:
            if format == Pixel.GA:
                src = self._source(format, data)
                grey = _lane(src, 0, 2, self._count)
                for offset in range(3):
                    self._write(offset, grey)
                self._write(3, _lane(src, 1, 2, self._count))
                return True
            if format == Pixel.GREY:
                return self.copy_alpha(format, data)
        return False

    def copy_alpha(self, format, data):
        """Copy only the alpha channel; False if either side has none."""
        format = Pixel(format)
        if Pixel.NONE in (self.format, format):
            return False
        if Pixel.RGB in (self.format, format):
            return False
        src = self._source(format, data)
        if format == self.format == Pixel.GREY:
            self.data[:] = src[:self.size()]
            return True
        self._write(self._stride - 1, _lane(src, int(format) - 1, int(format), self._count))
        return True

    def copy_color(self, format, data):
        """Copy only the colour (or grey) channels."""
        format = Pixel(format)
        if Pixel.NONE in (self.format, format):
            return False
        src = self._source(format, data)
        if format == self.format and format in (Pixel.RGB, Pixel.GREY):
            self.data[:] = src[:self.size()]
            return True
        stride = int(format)
        count = self._count
        if self._stride > 2:
            if stride > 2:
                for offset in range(3):
                    self._write(offset, _lane(src, offset, stride, count))
            else:
                grey = _lane(src, 0, stride, count)
                for offset in range(3):
                    self._write(offset, grey)
        elif stride > 2:
            self._write(0, _lane(src, 1, stride, count))
        else:
            self._write(0, _lane(src, 0, stride, count))
        return True


class ImageDecoder(ABC):
    """Turns encoded bytes into an :class:`Image`."""

    @abstractmethod
    def decode(self, data):
        """Decode ``data`` and return an :class:`Image`."""


class ImageEncoder(ABC):
    """Turns an :class:`Image` into encoded bytes."""

    @abstractmethod
    def encode(self, image):
        """Encode ``image`` and return the bytes."""