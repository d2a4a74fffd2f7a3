"""A small, seedable 32-bit permuted congruential generator."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 6364136223846793005
_DEFAULT_INC = 1442695040888963407


class Rand32:
    """PCG-XSH-RR generator with 64-bit state and 32-bit output."""

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= _MASK64:
            raise ValueError(f"seed must fit in 64 bits: {seed!r}")
        self._state = 0
        self._inc = ((_DEFAULT_INC << 1) | 1) & _MASK64
        self.rand_u32()
        self._state = (self._state + seed) & _MASK64
        self.rand_u32()

    def rand_u32(self) -> int:
        """Next uniformly distributed 32-bit value."""
        old = self._state
        self._state = (old * _MULTIPLIER + self._inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & _MASK32

    def rand_range(self, low: int, high: int) -> int:
        """Uniform value in ``[low, high)``; an empty range yields ``low``."""
        if not 0 <= low <= high <= _MASK32:
            raise ValueError(f"invalid range: {low}..{high}")
        span = high - low
        product = self.rand_u32() * span
        leftover = product & _MASK32
        if leftover < span:
            threshold = (-span & _MASK32) % span
            while leftover < threshold:
                product = self.rand_u32() * span
                leftover = product & _MASK32
        return (product >> 32) + low