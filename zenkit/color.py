"""Pixel formats and colour types in byte and float form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Pixel(IntEnum):
    """Pixel layouts; the value is the number of bytes per pixel."""

    NONE = 0
    GREY = 1
    GA = 2
    RGB = 3
    RGBA = 4


class NamedColor(IntEnum):
    """Common colours as 0xRRGGBB."""

    BLACK = 0x000000
    WHITE = 0xFFFFFF
    GREY = 0x808080
    RED = 0xFF0000
    GREEN = 0x00FF00
    BLUE = 0x0000FF
    CYAN = 0x00FFFF
    MAGENTA = 0xFF00FF
    YELLOW = 0xFFFF00


@dataclass
class Color3b:
    """An RGB colour with one byte per channel."""

    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_rgb(cls, rgb):
        """Build from 0xRRGGBB (a :class:`NamedColor` works too)."""
        rgb = int(rgb)
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    def to_rgb(self):
        """Return the colour as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Color4b:
    """An RGBA colour with one byte per channel; opaque black by default."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0xFF

    @classmethod
    def from_rgba(cls, rgba):
        """Build from 0xRRGGBBAA."""
        return cls((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)

    @classmethod
    def from_argb(cls, argb):
        """Build from 0xAARRGGBB."""
        return cls((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)

    @classmethod
    def from_color3b(cls, rgb, a=0xFF):
        """Build from an RGB colour and an alpha byte."""
        return cls(rgb.r, rgb.g, rgb.b, a)

    @classmethod
    def from_named(cls, color, a=0xFF):
        """Build from a 0xRRGGBB value and an alpha byte."""
        return cls.from_color3b(Color3b.from_rgb(color), a)

    @classmethod
    def from_color4f(cls, color):
        """Build from a float colour, rounding each channel to a byte."""

        def to_byte(value):
            return int(value * 0xFF + 0.5) & 0xFF

        return cls(to_byte(color.red), to_byte(color.green), to_byte(color.blue), to_byte(color.alpha))

    def to_rgba(self):
        """Return the colour as 0xRRGGBBAA."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def to_argb(self):
        """Return the colour as 0xAARRGGBB."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_color3b(self):
        """Drop the alpha channel."""
        return Color3b(self.r, self.g, self.b)

    def set_grey(self, grey):
        """Set red, green and blue to ``grey``, keeping alpha."""
        self.r = self.g = self.b = grey

    def rf(self):
        return self.r / 0xFF

    def gf(self):
        return self.g / 0xFF

    def bf(self):
        return self.b / 0xFF

    def af(self):
        return self.a / 0xFF


@dataclass
class Color4f:
    """An RGBA colour with float channels in [0, 1]; opaque black by default."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    @classmethod
    def from_color4b(cls, color):
        """Build from a byte colour."""
        return cls(color.rf(), color.gf(), color.bf(), color.af())

    @classmethod
    def from_named(cls, color):
        """Build an opaque colour from a 0xRRGGBB value."""
        return cls.from_color4b(Color4b.from_named(color))

    def __mul__(self, other):
        if not isinstance(other, Color4f):
            return NotImplemented
        return Color4f(
            self.red * other.red,
            self.green * other.green,
            self.blue * other.blue,
            self.alpha * other.alpha,
        )


def channel_lerp(start, end, value):
    """Linear interpolation of one channel."""
    return start + (end - start) * value


def color4f_lerp(c0, c1, value):
    """Linear interpolation of every channel of two float colours."""
    return Color4f(
        channel_lerp(c0.red, c1.red, value),
        channel_lerp(c0.green, c1.green, value),
        channel_lerp(c0.blue, c1.blue, value),
        channel_lerp(c0.alpha, c1.alpha, value),
    )