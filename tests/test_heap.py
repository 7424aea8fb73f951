"""Tests for the MinHeap primitive."""

import random

from algorithms.heap import HeapItem, MinHeap


def test_empty_heap():
    heap = MinHeap()
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.pop() is None
    assert heap.peek() is None


def test_pops_in_priority_order():
    heap = MinHeap()
    for key, priority in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
        heap.push(HeapItem(key, priority))

    assert heap.peek() == HeapItem("a", 1)
    assert [heap.pop().key for _ in range(4)] == ["a", "b", "c", "d"]
    assert heap.is_empty()


def test_duplicate_keys_are_separate_entries():
    heap = MinHeap()
    heap.push(HeapItem("x", 9))
    heap.push(HeapItem("x", 2))
    assert len(heap) == 2
    assert heap.pop() == HeapItem("x", 2)
    assert heap.pop() == HeapItem("x", 9)


def test_equal_priorities_with_unorderable_keys():
    heap = MinHeap()
    heap.push(HeapItem({"a": 1}, 1))
    heap.push(HeapItem({"b": 2}, 1))
    popped = [heap.pop().key, heap.pop().key]
    assert {"a": 1} in popped and {"b": 2} in popped


def test_matches_sorted_order_on_random_input():
    rng = random.Random(7)
    priorities = [rng.randint(0, 50) for _ in range(200)]

    heap = MinHeap()
    for i, p in enumerate(priorities):
        heap.push(HeapItem(i, p))

    out = []
    while not heap.is_empty():
        out.append(heap.pop().priority)
    assert out == sorted(priorities)
