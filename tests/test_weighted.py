from collections import Counter

from wfcgen.rng import Rand32
from wfcgen.weighted import random_index


def test_distribution_follows_weights():
    rng = Rand32(19950104)
    weights = [1, 2, 7]

    counts = Counter(random_index(weights, rng) for _ in range(10000))

    assert counts[0] == 1004
    assert counts[1] == 1951
    assert counts[2] == 7045
    assert sum(counts.values()) == 10000


def test_zero_weights_are_never_chosen():
    rng = Rand32(5)
    assert {random_index([0, 5, 0], rng) for _ in range(200)} == {1}


def test_no_weight_gives_none():
    rng = Rand32(5)
    assert random_index([], rng) is None
    assert random_index([0, 0], rng) is None