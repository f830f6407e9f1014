"""A simple in-memory RGBA image with PNG loading and saving."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

from PIL import Image as PILImage

PathType = Union[str, "PathLike[str]"]


@dataclass
class Pixel:
    """One pixel: 8-bit red, green and blue and an alpha in [0, 1]."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: float = 1.0


class Image:
    """A rectangular grid of pixels; (0, 0) is the upper-left corner."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self._width = width
        self._height = height
        self._pixels = [Pixel() for _ in range(width * height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[Pixel]:
        """Yield every pixel in row-major order."""
        return iter(self._pixels)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y); out-of-range coordinates are clamped."""
        if self._width == 0 or self._height == 0:
            raise ValueError("cannot access a pixel of an image with no pixels")
        if x < 0 or y < 0:
            raise ValueError(f"pixel coordinates must not be negative: ({x}, {y})")
        if x >= self._width:
            warnings.warn(
                f"get_pixel({x}, {y}) is outside the image width {self._width}; "
                f"truncating x to {self._width - 1}",
                RuntimeWarning,
                stacklevel=2,
            )
            x = self._width - 1
        if y >= self._height:
            warnings.warn(
                f"get_pixel({x}, {y}) is outside the image height {self._height}; "
                f"truncating y to {self._height - 1}",
                RuntimeWarning,
                stacklevel=2,
            )
            y = self._height - 1
        return self._pixels[x + y * self._width]

    def resize(self, new_width: int, new_height: int) -> None:
        """Resize in place, keeping overlapping pixels and cropping the rest."""
        if new_width < 0 or new_height < 0:
            raise ValueError("image dimensions must not be negative")
        resized = [Pixel() for _ in range(new_width * new_height)]
        for y in range(min(new_height, self._height)):
            for x in range(min(new_width, self._width)):
                old = self._pixels[x + y * self._width]
                resized[x + y * new_width] = Pixel(old.r, old.g, old.b, old.a)
        self._width = new_width
        self._height = new_height
        self._pixels = resized

    def copy(self) -> "Image":
        """Return an independent copy of this image."""
        duplicate = Image()
        duplicate._width = self._width
        duplicate._height = self._height
        duplicate._pixels = [Pixel(p.r, p.g, p.b, p.a) for p in self._pixels]
        return duplicate

    def save(self, path: PathType) -> None:
        """Write the image to a PNG file."""
        if self._width == 0 or self._height == 0:
            raise ValueError("cannot save an image with no pixels")
        data = bytes(
            channel
            for p in self._pixels
            for channel in (p.r, p.g, p.b, min(255, max(0, int(p.a * 255))))
        )
        PILImage.frombytes("RGBA", (self._width, self._height), data).save(path, format="PNG")


def load_png(path: PathType) -> Image:
    """Read a PNG file into an Image."""
    with PILImage.open(path) as source:
        rgba = source.convert("RGBA")
        width, height = rgba.size
        data = rgba.tobytes()
    image = Image(width, height)
    image._pixels = [
        Pixel(data[i], data[i + 1], data[i + 2], data[i + 3] / 255.0)
        for i in range(0, len(data), 4)
    ]
    return image