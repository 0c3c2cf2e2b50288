import pytest

from zenkit.color import (
    Color3b,
    Color4b,
    Color4f,
    NamedColor,
    channel_lerp,
    color4f_lerp,
)


def test_color3b_from_named():
    assert Color3b.from_rgb(NamedColor.RED) == Color3b(0xFF, 0, 0)
    assert Color3b.from_rgb(NamedColor.BLUE) == Color3b(0, 0, 0xFF)


@pytest.mark.parametrize("rgb", [0x000000, 0x123456, 0xFFFFFF, int(NamedColor.GREY)])
def test_color3b_round_trip(rgb):
    assert Color3b.from_rgb(rgb).to_rgb() == rgb


def test_color4b_default_is_opaque_black():
    assert Color4b().to_rgba() == 0x0FF


def test_color4b_from_rgba_channels():
    color = Color4b.from_rgba(0x11223344)
    assert (color.r, color.g, color.b, color.a) == (0x11, 0x22, 0x33, 0x44)


@pytest.mark.parametrize("value", [0, 0x11223344, 0xFFFFFFFF, 0x80FF0001])
def test_color4b_round_trips(value):
    assert Color4b.from_rgba(value).to_rgba() == value
    assert Color4b.from_argb(value).to_argb() == value


def test_rgba_and_argb_describe_same_colour():
    color = Color4b.from_rgba(0x11223344)
    assert Color4b.from_argb(color.to_argb()) == color


def test_from_named_and_color3b():
    color = Color4b.from_named(NamedColor.YELLOW, 0x10)
    assert color.to_color3b() == Color3b.from_rgb(NamedColor.YELLOW)
    assert color.a == 0x10
    assert Color4b.from_color3b(color.to_color3b(), 0x10) == color


def test_set_grey_keeps_alpha():
    color = Color4b.from_rgba(0x11223344)
    color.set_grey(0x80)
    assert color == Color4b(0x80, 0x80, 0x80, 0x44)


def test_float_channels():
    color = Color4b(0xFF, 0, 0xFF, 0)
    assert (color.rf(), color.gf(), color.bf(), color.af()) == (1.0, 0.0, 1.0, 0.0)


@pytest.mark.parametrize("value", [0, 0x01020304, 0x7F80FE01, 0xFFFFFFFF])
def test_color4f_byte_round_trip(value):
    color = Color4b.from_rgba(value)
    assert Color4b.from_color4f(Color4f.from_color4b(color)) == color


def test_color4f_from_named():
    assert Color4f.from_named(NamedColor.WHITE) == Color4f(1.0, 1.0, 1.0, 1.0)
    assert Color4f.from_named(NamedColor.BLACK) == Color4f()


def test_color4f_multiply():
    color = Color4f(0.25, 0.5, 0.75, 1.0)
    assert Color4f(1.0, 1.0, 1.0, 1.0) * color == color
    assert Color4f(0.0, 0.0, 0.0, 0.0) * color == Color4f(0.0, 0.0, 0.0, 0.0)


def test_color4f_multiply_in_place():
    color = Color4f(0.25, 0.5, 0.75, 1.0)
    color *= Color4f(1.0, 1.0, 1.0, 1.0)
    assert color == Color4f(0.25, 0.5, 0.75, 1.0)


def test_lerp_endpoints():
    c0 = Color4f(0.1, 0.2, 0.3, 0.4)
    c1 = Color4f(0.9, 0.8, 0.7, 0.6)
    assert color4f_lerp(c0, c1, 0.0) == c0
    assert color4f_lerp(c0, c1, 1.0) == c1
    assert channel_lerp(3.0, 3.0, 0.7) == 3.0