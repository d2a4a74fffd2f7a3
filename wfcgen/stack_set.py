"""A stack that holds each value at most once."""

from __future__ import annotations


class StackSet:
    """LIFO stack of indices below ``max_len`` that ignores pushes of values already held."""

    def __init__(self, max_len: int) -> None:
        self._occupied = [False] * max_len
        self._stack: list[int] = []

    @classmethod
    def full(cls, max_len: int) -> StackSet:
        """A stack holding every value from 0 to ``max_len - 1``."""
        stack_set = cls(max_len)
        stack_set._occupied = [True] * max_len
        stack_set._stack = list(range(max_len))
        return stack_set

    def push(self, value: int) -> None:
        if value < 0:
            raise IndexError(f"value out of range: {value}")
        if not self._occupied[value]:
            self._occupied[value] = True
            self._stack.append(value)

    def pop(self) -> int | None:
        """Remove and return the top value, or None when empty."""
        if not self._stack:
            return None
        value = self._stack.pop()
        self._occupied[value] = False
        return value

    def __len__(self) -> int:
        return len(self._stack)