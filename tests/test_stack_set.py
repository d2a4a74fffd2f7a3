import pytest

from wfcgen.stack_set import StackSet


def test_it_behaves_like_a_stack_with_unique_elements():
    stack_set = StackSet(5)
    for value in (2, 2, 2, 2, 0, 0, 1, 1, 4, 4, 3, 3):
        stack_set.push(value)

    assert stack_set.pop() == 3
    assert stack_set.pop() == 4
    assert stack_set.pop() == 1
    assert stack_set.pop() == 0
    assert stack_set.pop() == 2
    assert stack_set.pop() is None


def test_full_pops_in_descending_order():
    stack_set = StackSet.full(4)
    assert len(stack_set) == 4
    popped = []
    while (value := stack_set.pop()) is not None:
        popped.append(value)
    assert popped == [3, 2, 1, 0]


def test_value_can_be_pushed_again_after_pop():
    stack_set = StackSet(3)
    stack_set.push(1)
    assert stack_set.pop() == 1
    stack_set.push(1)
    assert len(stack_set) == 1
    assert stack_set.pop() == 1


def test_full_ignores_duplicates():
    stack_set = StackSet.full(3)
    stack_set.push(0)
    assert len(stack_set) == 3


def test_push_out_of_range_raises():
    stack_set = StackSet(2)
    with pytest.raises(IndexError):
        stack_set.push(2)