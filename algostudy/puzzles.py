"""Small counting, string and arithmetic puzzles."""

from __future__ import annotations

import math
import string
from collections import Counter
from typing import Iterable, Sequence


def anagram_changes(text: str) -> int:
    """Changes needed to make the two halves anagrams, or -1 for odd length."""
    if len(text) % 2:
        return -1
    half = len(text) // 2
    available = Counter(text[:half])
    changes = 0
    for char in text[half:]:
        if available[char]:
            available[char] -= 1
        else:
            changes += 1
    return changes


def class_cancelled(arrivals: Iterable[int], threshold: int) -> bool:
    """True when fewer than ``threshold`` students arrive on time (arrival <= 0)."""
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return on_time < threshold


def birthday_gift_expectation(values: Iterable[float]) -> float:
    """Expected gift value when each item is chosen with probability one half."""
    return sum(0.5 * value for value in values)


def count_dividing_digits(n: int) -> int:
    """How many decimal digits of ``n`` (with repeats, zeros skipped) divide ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return sum(1 for char in str(n) if char != "0" and n % int(char) == 0)


def gemstones(rocks: Sequence[str]) -> int:
    """Number of distinct characters present in every rock."""
    if not rocks:
        return 0
    common = set(rocks[0])
    for rock in rocks[1:]:
        common &= set(rock)
    return len(common)


def is_pangram(text: str) -> bool:
    """True when ``text`` holds every letter of the English alphabet."""
    return set(string.ascii_lowercase) <= set(text.lower())


def _is_palindrome(text: str, start: int, end: int) -> bool:
    while start < end:
        if text[start] != text[end]:
            return False
        start += 1
        end -= 1
    return True


def palindrome_index(text: str) -> int:
    """Index whose removal makes ``text`` a palindrome, or -1 if it already is one."""
    left, right = 0, len(text) - 1
    while left < right:
        if text[left] != text[right]:
            return left if _is_palindrome(text, left + 1, right) else right
        left += 1
        right -= 1
    return -1


def counting_sort_strings(pairs: Sequence[tuple[int, str]]) -> list[str]:
    """Strings stably ordered by key, with those in the first half replaced by "-"."""
    half = len(pairs) // 2
    buckets: list[list[str]] = [[] for _ in range(100)]
    for index, (key, text) in enumerate(pairs):
        if not 0 <= key < 100:
            raise ValueError("keys must be between 0 and 99")
        buckets[key].append("-" if index < half else text)
    return [text for bucket in buckets for text in bucket]


def position_of(value: int, values: Sequence[int]) -> int:
    """Index of the first occurrence of ``value`` in ``values``."""
    for index, item in enumerate(values):
        if item == value:
            return index
    raise ValueError(f"{value} is not present")


def minimum_draws(pairs: int) -> int:
    """Socks to draw to be certain of a matching pair among ``pairs`` pairs."""
    if pairs < 0:
        raise ValueError("pairs must be non-negative")
    return pairs + 1


def handshakes(people: int) -> int:
    """Handshakes when each of ``people`` shakes hands with every other once."""
    if people < 0:
        raise ValueError("people must be non-negative")
    return people * (people - 1) // 2


def diwali_light_patterns(bulbs: int) -> int:
    """Number of non-empty on/off patterns of ``bulbs`` bulbs, modulo 100000."""
    if bulbs < 0:
        raise ValueError("bulbs must be non-negative")
    if bulbs == 0:
        return 0
    return pow(2, bulbs, 100000) - 1


def restaurant_pieces(length: int, breadth: int) -> int:
    """Fewest equal square pieces a length by breadth bread can be cut into."""
    if length < 1 or breadth < 1:
        raise ValueError("dimensions must be positive")
    side = math.gcd(length, breadth)
    return (length // side) * (breadth // side)


def balanced_index_exists(values: Sequence[int]) -> bool:
    """True when some element has equal sums on its left and its right."""
    total = sum(values)
    left = 0
    for value in values:
        if left == total - left - value:
            return True
        left += value
    return False


def pair_sums(values: Iterable[int], total: int) -> list[tuple[int, int]]:
    """Pairs (value, earlier value) adding to ``total``, in the order found.

    Only positive complements are reported.
    """
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        complement = total - value
        if complement > 0 and complement in seen:
            pairs.append((value, complement))
        seen.add(value)
    return pairs