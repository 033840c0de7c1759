import random

import pytest

from algokit.heap import BinaryHeap, k_smallest, merge_sorted


def test_pop_order_is_sorted():
    rng = random.Random(1)
    values = [rng.randint(-1000, 1000) for _ in range(500)]
    heap = BinaryHeap()
    for v in values:
        heap.push(v)
    assert len(heap) == 500
    assert [heap.pop() for _ in range(500)] == sorted(values)
    assert not heap


def test_extract_half_then_insert_smaller():
    heap = BinaryHeap()
    for i in range(10000):
        heap.push(i)
    for _ in range(5000):
        heap.pop()
    heap.push(-1000)
    assert heap.pop() == -1000
    assert heap.peek() == 5000


def test_empty_heap_raises():
    heap = BinaryHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_key_function():
    heap = BinaryHeap(key=len)
    for word in ["ccc", "a", "bb", "dddd"]:
        heap.push(word)
    assert heap.pop() == "a"
    assert heap.pop() == "bb"
    assert len(heap) == 2


def test_merge_sorted_example():
    arrays = [
        [1, 2, 3, 4, 5, 6],
        [0, 1, 24, 335],
        [],
        [34, 3434, 3535, 35353],
        [-100, -10, 2333],
    ]
    expected = sorted(x for array in arrays for x in array)
    assert merge_sorted(arrays) == expected


def test_merge_sorted_empty():
    assert merge_sorted([]) == []
    assert merge_sorted([[], []]) == []


def test_k_smallest_largest_first():
    rng = random.Random(5)
    values = [rng.randrange(1000) for _ in range(300)]
    assert k_smallest(values, 10) == sorted(values)[:10][::-1]


def test_k_smallest_more_than_available():
    assert k_smallest([3, 1, 2], 5) == [3, 2, 1]
    assert k_smallest([3, 1, 2], 0) == []


def test_k_smallest_negative_k():
    with pytest.raises(ValueError):
        k_smallest([1, 2], -1)