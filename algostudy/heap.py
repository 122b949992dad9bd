"""Array-backed binary max-heap operations on Python lists."""

from __future__ import annotations

from typing import Iterable


def sift_down(heap: list, index: int, size: int) -> None:
    """Move ``heap[index]`` down until the first ``size`` items form a max-heap."""
    while True:
        left = 2 * index + 1
        if left >= size:
            return
        child = left
        right = left + 1
        if right < size and heap[right] > heap[left]:
            child = right
        if heap[child] <= heap[index]:
            return
        heap[child], heap[index] = heap[index], heap[child]
        index = child


def _sift_up(heap: list, index: int) -> None:
    value = heap[index]
    while index > 0:
        parent = (index - 1) // 2
        if heap[parent] > value:
            break
        heap[index] = heap[parent]
        index = parent
    heap[index] = value


def heap_push(heap: list, value) -> None:
    """Add ``value`` to the max-heap ``heap``."""
    heap.append(value)
    _sift_up(heap, len(heap) - 1)


def heap_pop(heap: list):
    """Remove and return the largest item of the max-heap ``heap``."""
    if not heap:
        raise IndexError("pop from empty heap")
    top = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        sift_down(heap, 0, len(heap))
    return top


def build_heap(values: Iterable) -> list:
    """A new max-heap holding ``values``."""
    heap: list = []
    for value in values:
        heap_push(heap, value)
    return heap


def heap_sort(values: Iterable) -> list:
    """A new list of ``values`` in ascending order, sorted by heap sort."""
    heap = build_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        sift_down(heap, 0, end)
    return heap