"""Packed RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_VALUE = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    """A colour packed into 32 bits: red in the lowest byte, alpha in the highest."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MAX_VALUE:
            raise ValueError(f"colour value out of range: {self.value!r}")

    def r(self) -> int:
        return self.value & 0xFF

    def g(self) -> int:
        return (self.value >> 8) & 0xFF

    def b(self) -> int:
        return (self.value >> 16) & 0xFF

    def a(self) -> int:
        return (self.value >> 24) & 0xFF