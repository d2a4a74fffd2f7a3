"""Weighted random choice."""

from __future__ import annotations

from collections.abc import Iterable

from .rng import Rand32


def random_index(weights: Iterable[int], rng: Rand32) -> int | None:
    """Pick an index with probability proportional to its weight.

    Returns None when every weight is zero or there are no weights.
    """
    weights = list(weights)
    pick = rng.rand_range(0, sum(weights))
    upper = 0
    for index, weight in enumerate(weights):
        lower, upper = upper, upper + weight
        if lower <= pick < upper:
            return index
    return None