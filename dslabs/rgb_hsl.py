"""Conversions between 8-bit RGBA colours and HSLA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 0.0001
_GRAY_SATURATION = 0.001


@dataclass(frozen=True)
class Rgba:
    """An RGBA colour with every channel in the range [0, 255]."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class Hsla:
    """An HSLA colour: hue in degrees [0, 360], the rest in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1.0


def _round_byte(value: float) -> int:
    """Round half away from zero and keep the result inside a byte."""
    return min(255, max(0, math.floor(value + 0.5)))


def rgb_to_hsl(rgb: Rgba) -> Hsla:
    """Convert an RGBA colour to HSLA."""
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    low = min(r, g, b)
    high = max(r, g, b)
    chroma = high - low

    alpha = rgb.a / 255.0
    lightness = 0.5 * (high + low)

    # Grays have no defined hue; saturation is zero.
    if chroma < _EPSILON or high < _EPSILON:
        return Hsla(0.0, 0.0, lightness, alpha)

    saturation = chroma / (1 - abs(2 * lightness - 1))

    if high == r:
        hue = math.fmod((g - b) / chroma, 6)
    elif high == g:
        hue = (b - r) / chroma + 2
    else:
        hue = (r - g) / chroma + 4

    hue *= 60
    if hue < 0:
        hue += 360

    return Hsla(hue, saturation, lightness, alpha)


def hsl_to_rgb(hsl: Hsla) -> Rgba:
    """Convert an HSLA colour to RGBA."""
    alpha = _round_byte(hsl.a * 255)

    if hsl.s <= _GRAY_SATURATION:
        level = _round_byte(hsl.l * 255)
        return Rgba(level, level, level, alpha)

    c = (1 - abs(2 * hsl.l - 1)) * hsl.s
    hh = hsl.h / 60
    x = c * (1 - abs(math.fmod(hh, 2) - 1))

    if hh <= 1:
        r, g, b = c, x, 0.0
    elif hh <= 2:
        r, g, b = x, c, 0.0
    elif hh <= 3:
        r, g, b = 0.0, c, x
    elif hh <= 4:
        r, g, b = 0.0, x, c
    elif hh <= 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    m = hsl.l - 0.5 * c
    return Rgba(
        _round_byte((r + m) * 255),
        _round_byte((g + m) * 255),
        _round_byte((b + m) * 255),
        alpha,
    )