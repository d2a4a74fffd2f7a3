"""Eight-neighbourhood patterns around a pixel."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from .color import Color
from .image import Image
from .stack_set import StackSet
from .vec2 import Vec2

PATTERN_SIZE = 8


class Direction(IntEnum):
    """The eight neighbour directions, in pattern order."""

    NW = 0
    N = 1
    NE = 2
    W = 3
    E = 4
    SW = 5
    S = 6
    SE = 7

    @property
    def offset(self) -> Vec2:
        return _OFFSETS[self]

    @property
    def reverse(self) -> Direction:
        """The opposite direction."""
        return Direction(PATTERN_SIZE - 1 - self)


_OFFSETS = {
    Direction.NW: Vec2(-1, -1),
    Direction.N: Vec2(0, -1),
    Direction.NE: Vec2(1, -1),
    Direction.W: Vec2(-1, 0),
    Direction.E: Vec2(1, 0),
    Direction.SW: Vec2(-1, 1),
    Direction.S: Vec2(0, 1),
    Direction.SE: Vec2(1, 1),
}


def _neighbor_indices(index: int, width: int, height: int) -> Iterator[int | None]:
    pos = Vec2.from_index(index, width)
    for direction in Direction:
        p = pos + direction.offset
        yield p.to_index(width) if p.is_inside(width, height) else None


@dataclass(frozen=True)
class Pattern8:
    """The colours around a pixel, one per direction; None beyond the image edge."""

    colors: tuple[Color | None, ...]

    def __post_init__(self) -> None:
        if len(self.colors) != PATTERN_SIZE:
            raise ValueError(f"a pattern holds {PATTERN_SIZE} colours, got {len(self.colors)}")

    @classmethod
    def empty(cls) -> Pattern8:
        return cls((None,) * PATTERN_SIZE)

    @classmethod
    def extract(cls, image: Image, pos: Vec2) -> Pattern8:
        """The pattern of ``image`` around ``pos``."""
        return cls(tuple(image.color_at(pos + d.offset) for d in Direction))

    def color_at(self, index: int) -> Color | None:
        return self.colors[index]

    def neighbors_and_colors(
        self, index: int, width: int, height: int
    ) -> list[tuple[int | None, Color | None]]:
        """Pairs of neighbour pixel index (None outside the grid) and pattern colour."""
        return list(zip(_neighbor_indices(index, width, height), self.colors))


def add_neighbors(indices: StackSet, index: int, width: int, height: int) -> None:
    """Push every in-grid neighbour of ``index`` onto ``indices``."""
    for neighbor in neighbors(index, width, height):
        indices.push(neighbor)


def neighbors(index: int, width: int, height: int) -> list[int]:
    """In-grid neighbour indices of ``index``, in direction order."""
    return [n for n in _neighbor_indices(index, width, height) if n is not None]


def neighbors_opt(index: int, width: int, height: int) -> list[int | None]:
    """Neighbour index per direction, None where it falls outside the grid."""
    return list(_neighbor_indices(index, width, height))