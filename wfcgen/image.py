"""In-memory RGBA images and PNG input/output."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike

from PIL import Image as PILImage

from .color import Color
from .vec2 import Vec2


@dataclass(frozen=True)
class Pixel:
    """A colour at a position."""

    pos: Vec2
    color: Color


@dataclass
class Image:
    """A row-major grid of colours."""

    width: int
    height: int
    colors: list[Color] = field(default_factory=list)

    def color_at(self, pos: Vec2) -> Color | None:
        """Colour at ``pos``, or None outside the image."""
        if not pos.is_inside(self.width, self.height):
            return None
        return self.colors[pos.to_index(self.width)]

    def set_pixel(self, pixel: Pixel) -> None:
        if not pixel.pos.is_inside(self.width, self.height):
            raise IndexError(f"pixel outside image: {pixel.pos}")
        self.colors[pixel.pos.to_index(self.width)] = pixel.color


def load_image(path: str | PathLike[str]) -> Image:
    """Read an image file and convert it to RGBA colours."""
    with PILImage.open(path) as img:
        rgba = img.convert("RGBA")
        width, height = rgba.size
        data = rgba.tobytes()
    colors = [Color(value) for (value,) in struct.iter_unpack("<I", data)]
    return Image(width, height, colors)


def save_image(image: Image, path: str | PathLike[str]) -> None:
    """Write an image; pixels without a colour are left transparent black."""
    pixel_count = image.width * image.height
    data = bytearray(4 * pixel_count)
    packed = b"".join(struct.pack("<I", color.value) for color in image.colors[:pixel_count])
    data[: len(packed)] = packed
    PILImage.frombytes("RGBA", (image.width, image.height), bytes(data)).save(path)