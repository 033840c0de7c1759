import random

import pytest

from algokit.fenwick import FenwickTree


@pytest.fixture
def tree():
    return FenwickTree([0, 1, 2, 3, 4, 5, 6, 7])


def test_sum(tree):
    assert tree.sum(1, 3) == 6
    assert tree.sum(2, 3) == 5
    assert tree.sum(0, 7) == 28


def test_add(tree):
    tree.add(5, 100)
    assert tree.sum(0, 7) == 128
    for i in range(8):
        tree.add(i, 1)
    assert tree.sum(0, 7) == 136


def test_matches_slice_sums_after_random_updates():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(97)]
    tree = FenwickTree(values)
    for _ in range(200):
        pos = rng.randrange(len(values))
        delta = rng.randint(-20, 20)
        values[pos] += delta
        tree.add(pos, delta)
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        assert tree.sum(left, right) == sum(values[left:right + 1])


def test_zeros():
    tree = FenwickTree.zeros(10)
    assert len(tree) == 10
    assert tree.sum(0, 9) == 0
    tree.add(4, 7)
    assert tree.sum(0, 3) == 0
    assert tree.sum(4, 4) == 7
    assert tree.sum(0, 9) == 7


def test_zeros_negative_size():
    with pytest.raises(ValueError):
        FenwickTree.zeros(-1)


def test_out_of_range(tree):
    with pytest.raises(IndexError):
        tree.add(8, 1)
    with pytest.raises(IndexError):
        tree.sum(0, 8)
    with pytest.raises(IndexError):
        tree.sum(-1, 3)
    with pytest.raises(IndexError):
        tree.sum(5, 2)