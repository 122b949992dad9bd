"""Subsequence, substring and subarray problems over sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence, TypeVar

T = TypeVar("T")


def longest_common_subsequence(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """One longest sequence of items that appears, in order, in both ``a`` and ``b``."""
    rows, cols = len(a), len(b)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, item_a in enumerate(a, start=1):
        for j, item_b in enumerate(b, start=1):
            if item_a == item_b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    result: list[T] = []
    i, j = rows, cols
    while i and j:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def longest_increasing_subsequence_length(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence of ``values``."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def substring_diff(k: int, first: str, second: str) -> int:
    """Longest L such that some length-L substrings of both strings differ in at most ``k`` places."""
    if k < 0:
        raise ValueError("k must be non-negative")
    n, m = len(first), len(second)
    starts = [(i, 0) for i in range(n)] + [(0, j) for j in range(1, m)]
    best = 0
    for i0, j0 in starts:
        length = min(n - i0, m - j0)
        mismatches = [first[i0 + t] != second[j0 + t] for t in range(length)]
        left = 0
        bad = 0
        for right, mismatch in enumerate(mismatches):
            bad += mismatch
            while bad > k:
                bad -= mismatches[left]
                left += 1
            best = max(best, right - left + 1)
    return best


def max_subarray_sums(values: Sequence[int]) -> tuple[int, int]:
    """Best contiguous sum and best non-contiguous (non-empty) sum of ``values``."""
    if not values:
        raise ValueError("need at least one value")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    positives = sum(v for v in values if v > 0)
    non_contiguous = best if best < 0 else positives
    return best, non_contiguous


def max_increasing_chain_weight(values: Sequence[int]) -> int:
    """Largest weight of a chain that hops from each item to the next larger one after it.

    The weight of position i is its value plus the weight of the first later
    position holding a larger value.
    """
    if not values:
        raise ValueError("need at least one value")
    weights = [0] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        while stack and values[stack[-1]] <= values[index]:
            stack.pop()
        weights[index] = values[index] + (weights[stack[-1]] if stack else 0)
        stack.append(index)
    return max(weights)


def stock_max_profit(prices: Sequence[int]) -> int:
    """Profit from buying while a higher price lies ahead and selling at the peaks."""
    profit = 0
    peak = None
    for price in reversed(prices):
        if peak is None or price > peak:
            peak = price
        profit += peak - price
    return profit