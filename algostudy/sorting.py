"""Sorting routines that also report how much work they did."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

LOUISE = "Louise"
RICHARD = "Richard"


def closest_pairs(values: Iterable[int]) -> list[tuple[int, int]]:
    """Adjacent pairs of the sorted values whose difference is the smallest.

    Pairs are listed in ascending order.
    """
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("need at least two values")
    smallest = min(b - a for a, b in pairwise(ordered))
    return [(a, b) for a, b in pairwise(ordered) if b - a == smallest]


def insertion_sort_shifts(values: Iterable[int]) -> int:
    """Number of element shifts insertion sort makes to order ``values``."""
    items = list(values)
    shifts = 0
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
            shifts += 1
        items[j + 1] = current
    return shifts


def quicksort_swaps(values: Iterable[int]) -> int:
    """Swaps made by quicksort with the last element as pivot (Lomuto partition).

    Every swap is counted, including swaps of an element with itself.
    """
    items = list(values)
    swaps = 0
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = items[end]
        boundary = start
        for j in range(start, end):
            if items[j] < pivot:
                items[j], items[boundary] = items[boundary], items[j]
                swaps += 1
                boundary += 1
        items[end], items[boundary] = items[boundary], items[end]
        swaps += 1
        pending.append((boundary + 1, end))
        pending.append((start, boundary - 1))
    return swaps


def shift_swap_difference(values: Sequence[int]) -> int:
    """Insertion sort shifts minus quicksort swaps for the same input."""
    return insertion_sort_shifts(values) - quicksort_swaps(values)


def counter_game_winner(n: int) -> str:
    """Winner of the counter game starting from ``n``, with Louise moving first.

    On each move a power of two is halved; any other number loses its
    largest power of two. The player who brings the counter to 1 wins.
    """
    if n < 1:
        raise ValueError("counter must be positive")
    moves = 0
    while n != 1:
        if n & (n - 1) == 0:
            n >>= 1
        else:
            n -= 1 << (n.bit_length() - 1)
        moves += 1
    return LOUISE if moves % 2 else RICHARD


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) < 2:
        return items, 0
    half = len(items) // 2
    left, left_count = _sort_and_count(items[:half])
    right, right_count = _sort_and_count(items[half:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Number of pairs that appear in the wrong order, by merge sort."""
    return _sort_and_count(list(values))[1]


def _median_of_three(items: list[int], start: int, middle: int, end: int) -> int:
    a, b, c = items[start], items[middle], items[end]
    if a < b < c or c < a < b or (b < a < c) or (a < c and a > b) or (a > c and a < b):
        if (b < a < c) or (c < a < b):
            return start
    if (a < b < c) or (c < b < a):
        return middle
    return end


def quicksort_comparisons(values: Iterable[int]) -> int:
    """Comparisons made by quicksort with a median-of-three pivot.

    Each partition of a subarray of length m counts m - 1 comparisons.
    The pivot is the median of the first, middle and last elements.
    """
    items = list(values)
    comparisons = 0
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        comparisons += end - start
        middle = start + (end - start) // 2
        pivot_index = _median_of_three(items, start, middle, end)
        items[start], items[pivot_index] = items[pivot_index], items[start]
        pivot = items[start]
        boundary = start
        for i in range(start + 1, end + 1):
            if items[i] < pivot:
                boundary += 1
                items[boundary], items[i] = items[i], items[boundary]
        items[start], items[boundary] = items[boundary], items[start]
        pending.append((boundary + 1, end))
        pending.append((start, boundary - 1))
    return comparisons


def _hoare_partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while True:
        while items[i] <= pivot and i < high:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def hoare_quicksort(values: Iterable[int]) -> list[int]:
    """A new ascending list of ``values``, sorted by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _hoare_partition(items, low, high)
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return items