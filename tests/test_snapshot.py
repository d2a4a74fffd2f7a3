import pytest

from wfcgen.color import Color
from wfcgen.image import Image
from wfcgen.snapshot import Snapshot, SnapshotStack
from wfcgen.superposition import ImageSuperposition

A = Color(0xFF0000FF)
B = Color(0xFF00FF00)
C = Color(0xFFFF0000)


def superposition(colors):
    image_sp = ImageSuperposition(len(colors), 1, seed=1)
    image_sp.extract(Image(len(colors), 1, list(colors)))
    return image_sp


def test_pop_on_empty_stack_returns_none():
    assert SnapshotStack().pop() is None


def test_pop_removes_the_collapsed_colour():
    stack = SnapshotStack()
    stack.push(Snapshot(superposition([A, B]), 0, 0))

    snapshot = stack.pop()

    assert [c.color for c in snapshot.image_sp.pixels[0].colors] == [B]
    assert [c.color for c in snapshot.image_sp.pixels[1].colors] == [A, B]


def test_pop_swaps_the_last_colour_into_place():
    stack = SnapshotStack()
    stack.push(Snapshot(superposition([A, B, C]), 1, 0))

    snapshot = stack.pop()

    assert [c.color for c in snapshot.image_sp.pixels[1].colors] == [C, B]


def test_pop_removing_last_colour_keeps_order():
    stack = SnapshotStack()
    stack.push(Snapshot(superposition([A, B, C]), 0, 2))
    snapshot = stack.pop()
    assert [c.color for c in snapshot.image_sp.pixels[0].colors] == [A, B]


def test_len_and_lifo_order():
    stack = SnapshotStack()
    first = Snapshot(superposition([A, B]), 0, 0)
    second = Snapshot(superposition([A, B]), 1, 1)
    stack.push(first)
    stack.push(second)
    assert len(stack) == 2

    assert stack.pop() is second
    assert len(stack) == 1
    assert stack.pop() is first
    assert len(stack) == 0


def test_pop_with_invalid_colour_index_raises():
    stack = SnapshotStack()
    stack.push(Snapshot(superposition([A, B]), 0, 5))
    with pytest.raises(IndexError):
        stack.pop()