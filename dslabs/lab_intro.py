"""Simple image manipulations: grayscale, spotlight, UBC colours, watermark."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from dslabs.png import Image, Pixel, load_png

UBC_BLUE = Pixel(12, 35, 68, 1.0)
UBC_YELLOW = Pixel(247, 184, 0, 1.0)

_WATERMARK_WIDTH = 1024
_WATERMARK_HEIGHT = 768
_WATERMARK_BOOST = 40
_UINT32 = 1 << 32


def grayscale(image: Image) -> Image:
    """Return a copy of the image with every pixel set to its luminosity gray."""
    result = image.copy()
    for pixel in result:
        gray = int(0.229 * pixel.r + 0.587 * pixel.g + 0.114 * pixel.b)
        pixel.r = pixel.g = pixel.b = gray
    return result


def create_spotlight(image: Image, center_x: int, center_y: int) -> Image:
    """Return a copy darkened by 0.5% per pixel of distance from the centre."""
    result = image.copy()
    for y in range(result.height):
        for x in range(result.width):
            pixel = result.get_pixel(x, y)
            dx = x - center_x
            dy = y - center_y
            distance = math.sqrt((dx * dx + dy * dy) % _UINT32)
            factor = 0.0 if distance > 200 else (100 - distance * 0.5) / 100
            pixel.r = int(pixel.r * factor)
            pixel.g = int(pixel.g * factor)
            pixel.b = int(pixel.b * factor)
    return result


def ubcify(image: Image) -> Image:
    """Return a copy with every pixel set to UBC yellow or UBC blue, whichever is closer."""
    result = image.copy()
    for pixel in result:
        to_blue = colordist(pixel, UBC_BLUE)
        to_yellow = colordist(pixel, UBC_YELLOW)
        target = UBC_YELLOW if to_yellow <= to_blue else UBC_BLUE
        pixel.r, pixel.g, pixel.b = target.r, target.g, target.b
    return result


def watermark(first: Image, second: Image) -> Image:
    """Brighten ``first`` by 40 per channel wherever ``second`` is pure white.

    Both images are first resized to 1024x768; the inputs are left unchanged.
    """
    base = first.copy()
    overlay = second.copy()
    base.resize(_WATERMARK_WIDTH, _WATERMARK_HEIGHT)
    overlay.resize(_WATERMARK_WIDTH, _WATERMARK_HEIGHT)
    for target, mark in zip(base, overlay):
        if (mark.r, mark.g, mark.b) == (255, 255, 255):
            target.r = min(255, target.r + _WATERMARK_BOOST)
            target.g = min(255, target.g + _WATERMARK_BOOST)
            target.b = min(255, target.b + _WATERMARK_BOOST)
    return base


def colordist(px1: Pixel, px2: Pixel) -> float:
    """Colour distance blending on both white and black, alpha premultiplied."""
    delta_a = px1.a - px2.a
    total = 0.0
    for c1, c2 in ((px1.r, px2.r), (px1.g, px2.g), (px1.b, px2.b)):
        black = c1 / 255.0 * px1.a - c2 / 255.0 * px2.a
        white = black + delta_a
        total += max(black * black, white * white)
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the four transformed images of an input picture."""
    parser = argparse.ArgumentParser(description="Apply simple image effects.")
    parser.add_argument("--input", default="rosegarden.png", help="source image")
    parser.add_argument("--overlay", default="overlay.png", help="watermark image")
    parser.add_argument("--output-dir", default=".", help="where to write results")
    args = parser.parse_args(argv)

    out_dir = Path(args.output_dir)
    try:
        picture = load_png(args.input)
        grayscale(picture).save(out_dir / "out-grayscale.png")
        create_spotlight(picture, 300, 300).save(out_dir / "out-spotlight.png")
        ubcify(picture).save(out_dir / "out-ubcify.png")
        overlay = load_png(args.overlay)
        watermark(picture, overlay).save(out_dir / "out-watermark.png")
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())