"""Superpositions of colours and patterns over an output image."""

from __future__ import annotations

import copy
import math
import time
from dataclasses import dataclass, field

from .color import Color
from .image import Image
from .pattern import Direction, Pattern8, add_neighbors, neighbors_opt
from .rng import Rand32
from .stack_set import StackSet
from .vec2 import Vec2
from .weighted import random_index

_UNDECIDED_COLOR = Color(0xFFFF0000)
_DEAD_COLOR = Color(0xFF000000)


@dataclass(frozen=True)
class ColorSuperposition:
    """One colour still possible at a pixel, with the patterns that allow it."""

    color: Color
    patterns: tuple[Pattern8, ...]
    weight: int


@dataclass
class PixelSuperposition:
    """The colours still possible at one pixel."""

    colors: list[ColorSuperposition] = field(default_factory=list)

    def is_collapsed(self) -> bool:
        """True once at most one colour is left."""
        return len(self.colors) <= 1

    def total_weight(self) -> int:
        """Number of patterns over all remaining colours."""
        return sum(len(color.patterns) for color in self.colors)

    def entropy(self) -> float:
        """Shannon entropy of the colours, weighted by their pattern counts."""
        total = self.total_weight()
        if total == 0:
            return 0.0
        probabilities = (len(color.patterns) / total for color in self.colors)
        return -sum(p * math.log(p) for p in probabilities)

    def color_index(self, color: Color) -> int | None:
        """Position of ``color`` among the remaining colours, or None."""
        for index, candidate in enumerate(self.colors):
            if candidate.color == color:
                return index
        return None

    def random_index(self, rng: Rand32) -> int | None:
        """Pick a colour index with probability proportional to its weight."""
        return random_index((color.weight for color in self.colors), rng)


def _pattern_conforms(pattern: Pattern8, neighbor_colors: list[set[Color] | None]) -> bool:
    for pattern_color, possible in zip(pattern.colors, neighbor_colors):
        if possible is None:
            if pattern_color is not None:
                return False
            continue
        if pattern_color is None or pattern_color not in possible:
            return False
    return True


class ImageSuperposition:
    """Every output pixel with the colours and patterns still possible there."""

    def __init__(self, width: int, height: int, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns() // 1_000_000
        self.width = width
        self.height = height
        self.seed = seed
        self.pixels: list[PixelSuperposition] = []
        self.rng = Rand32(seed)

    def __copy__(self) -> ImageSuperposition:
        clone = ImageSuperposition.__new__(ImageSuperposition)
        clone.width = self.width
        clone.height = self.height
        clone.seed = self.seed
        clone.pixels = [PixelSuperposition(list(pixel.colors)) for pixel in self.pixels]
        clone.rng = copy.copy(self.rng)
        return clone

    def extract(self, image: Image) -> None:
        """Fill every output pixel with all colours and patterns found in ``image``."""
        by_color: dict[Color, list[Pattern8]] = {}
        for y in range(image.height):
            for x in range(image.width):
                pos = Vec2(x, y)
                color = image.color_at(pos)
                if color is None:
                    raise IndexError(f"position outside image: {pos}")
                by_color.setdefault(color, []).append(Pattern8.extract(image, pos))

        colors = [
            ColorSuperposition(color, tuple(patterns), len(patterns))
            for color, patterns in by_color.items()
        ]
        self.pixels = [PixelSuperposition(list(colors)) for _ in range(self.width * self.height)]

    def search(self) -> int | None:
        """Index of the undecided pixel with the lowest entropy, or None if all are decided."""
        best_index = None
        best_entropy = math.inf
        for index, pixel in enumerate(self.pixels):
            if pixel.is_collapsed():
                continue
            entropy = pixel.entropy()
            if entropy < best_entropy:
                best_entropy = entropy
                best_index = index
        return best_index

    def collapse(self, pixel_index: int) -> int:
        """Reduce a pixel to one randomly chosen colour and return that colour's index."""
        reweighted = [
            ColorSuperposition(color.color, color.patterns, len(color.patterns))
            for color in self.pixels[pixel_index].colors
        ]
        chosen = random_index((color.weight for color in reweighted), self.rng)
        if chosen is None:
            raise ValueError(f"pixel {pixel_index} has no colour to collapse to")
        self.pixels[pixel_index] = PixelSuperposition([reweighted[chosen]])
        return chosen

    def propagate(self, pixel_index: int) -> bool:
        """Spread the constraints of a pixel outwards; False on a contradiction."""
        indices = StackSet(len(self.pixels))
        add_neighbors(indices, pixel_index, self.width, self.height)
        while (index := indices.pop()) is not None:
            if not self.is_collapsed_at(index) and self._collapse_partially(index):
                if not self.pixels[index].colors:
                    return False
                add_neighbors(indices, index, self.width, self.height)
        return True

    def propagate_all(self) -> None:
        """Apply the constraints of every pixel until nothing changes."""
        indices = StackSet.full(len(self.pixels))
        while (index := indices.pop()) is not None:
            if not self.is_collapsed_at(index) and self._collapse_partially(index):
                add_neighbors(indices, index, self.width, self.height)

    def is_collapsed_at(self, pixel_index: int) -> bool:
        return self.pixels[pixel_index].is_collapsed()

    def to_image(self) -> Image:
        """Render the decided colours; undecided pixels are blue, dead ones black."""
        colors = []
        for pixel in self.pixels:
            if not pixel.colors:
                colors.append(_DEAD_COLOR)
            elif len(pixel.colors) > 1:
                colors.append(_UNDECIDED_COLOR)
            else:
                colors.append(pixel.colors[0].color)
        return Image(self.width, self.height, colors)

    def _reverse_colors(self, neighbor: int, direction: Direction) -> set[Color]:
        """Colours the neighbour's patterns allow at this pixel, seen from the neighbour."""
        reverse = direction.reverse
        return {
            color
            for option in self.pixels[neighbor].colors
            for pattern in option.patterns
            if (color := pattern.color_at(reverse)) is not None
        }

    def _collapse_partially(self, pixel_index: int) -> bool:
        neighbor_ids = neighbors_opt(pixel_index, self.width, self.height)
        neighbor_colors = [
            None if n is None else {option.color for option in self.pixels[n].colors}
            for n in neighbor_ids
        ]
        allowed_here = [
            None if n is None else self._reverse_colors(n, direction)
            for direction, n in zip(Direction, neighbor_ids)
        ]

        changed = False
        new_colors = []
        for option in self.pixels[pixel_index].colors:
            if any(allowed is not None and option.color not in allowed for allowed in allowed_here):
                changed = True
                continue

            kept = tuple(p for p in option.patterns if _pattern_conforms(p, neighbor_colors))
            if len(kept) != len(option.patterns):
                changed = True
            if kept:
                new_colors.append(ColorSuperposition(option.color, kept, option.weight))

        self.pixels[pixel_index] = PixelSuperposition(new_colors)
        return changed