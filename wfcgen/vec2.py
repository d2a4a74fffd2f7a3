"""Integer two-dimensional positions on a row-major grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A grid position or offset."""

    x: int
    y: int

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    @classmethod
    def from_index(cls, index: int, width: int) -> Vec2:
        """Position of a row-major index in a grid of the given width."""
        y, x = divmod(index, width)
        return cls(x, y)

    def to_index(self, width: int) -> int:
        """Row-major index of this position in a grid of the given width."""
        return width * self.y + self.x

    def is_inside(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height