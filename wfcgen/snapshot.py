"""Saved states to backtrack to after a contradiction."""

from __future__ import annotations

from dataclasses import dataclass

from .superposition import ImageSuperposition


@dataclass
class Snapshot:
    """The state before a collapse, and which colour the collapse chose."""

    image_sp: ImageSuperposition
    collapse_pixel_index: int
    collapse_color_index: int


class SnapshotStack:
    """LIFO stack of snapshots that rules out the failed choice when popping."""

    def __init__(self) -> None:
        self._stack: list[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Snapshot | None:
        """Remove the newest snapshot with its chosen colour taken out, or None."""
        if not self._stack:
            return None
        snapshot = self._stack.pop()
        colors = snapshot.image_sp.pixels[snapshot.collapse_pixel_index].colors
        index = snapshot.collapse_color_index
        if not 0 <= index < len(colors):
            raise IndexError(f"colour index out of range: {index}")
        last = colors.pop()
        if index < len(colors):
            colors[index] = last
        return snapshot

    def __len__(self) -> int:
        return len(self._stack)