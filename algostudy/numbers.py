"""Integer arithmetic, digit and bit manipulation routines."""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def _to_signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & _SIGN32 else value


def _build_byte_bit_table() -> tuple[int, ...]:
    table = [0] * 256
    for byte in range(1, 256):
        table[byte] = (byte & 1) + table[byte >> 1]
    return tuple(table)


_BYTE_BITS = _build_byte_bit_table()


def add_without_plus(a: int, b: int) -> int:
    """Add two 32-bit signed integers using only bitwise operations."""
    a &= _MASK32
    b &= _MASK32
    while b:
        carry = ((a & b) << 1) & _MASK32
        a ^= b
        b = carry
    return _to_signed32(a)


def trailing_zeros_of_factorial(n: int) -> int:
    """Number of trailing zeros in n!."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    count = 0
    while n:
        n //= 5
        count += n
    return count


def power_set(items: Iterable[T]) -> list[list[T]]:
    """All subsets of ``items``, ordered by their bit mask."""
    elements = list(items)
    return [
        [item for position, item in enumerate(elements) if (mask >> position) & 1]
        for mask in range(1 << len(elements))
    ]


def smallest_number_with_digit_product(n: int) -> int:
    """Smallest positive number whose decimal digits multiply to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n < 10:
        return n
    digits: list[int] = []
    for digit in range(9, 1, -1):
        while n % digit == 0:
            digits.append(digit)
            n //= digit
    if n != 1:
        raise ValueError("no number has digits with this product")
    return int("".join(str(d) for d in reversed(digits)))


def count_set_bits(n: int) -> int:
    """Set bits of a 32-bit value, counted one position at a time."""
    value = n & _MASK32
    count = 0
    while value:
        count += value & 1
        value >>= 1
    return count


def count_set_bits_kernighan(n: int) -> int:
    """Set bits of a 32-bit value, clearing the lowest one each step."""
    value = n & _MASK32
    count = 0
    while value:
        value &= value - 1
        count += 1
    return count


def count_set_bits_table(n: int) -> int:
    """Set bits of a 32-bit value, looked up a byte at a time."""
    return sum(_BYTE_BITS[byte] for byte in (n & _MASK32).to_bytes(4, "little"))


def clear_bits_from_msb(num: int, i: int) -> int:
    """Clear every bit from the most significant one down to bit ``i``."""
    if i < 0:
        raise ValueError("bit position must be non-negative")
    return num & ((1 << i) - 1)


def to_binary(num: int) -> str:
    """Binary representation of a non-negative number."""
    if num < 0:
        raise ValueError("number must be non-negative")
    return format(num, "b")


def to_binary_32(num: int) -> str:
    """The 32-bit two's complement representation of ``num``."""
    return format(num & _MASK32, "032b")


def lowest_set_bit(num: int) -> int:
    """Value of the lowest set bit of a 32-bit signed integer."""
    value = num & _MASK32
    return _to_signed32(value & -value)


def set_bit(num: int, bit: int) -> int:
    """``num`` with bit ``bit`` set."""
    if bit < 0:
        raise ValueError("bit position must be non-negative")
    return num | (1 << bit)


def clear_bit(num: int, bit: int) -> int:
    """``num`` with bit ``bit`` cleared."""
    if bit < 0:
        raise ValueError("bit position must be non-negative")
    return num & ~(1 << bit)


def next_with_same_bits(n: int) -> int:
    """Next larger integer with the same number of set bits."""
    if n <= 0:
        raise ValueError("n must be positive")
    smallest = n & -n
    ripple = n + smallest
    ones = ((n ^ ripple) >> 2) // smallest
    return ripple | ones


def _check_tree_label(label: int) -> None:
    if label < 1:
        raise ValueError("tree labels start at 1")


def lowest_common_ancestor(a: int, b: int) -> int:
    """Lowest common ancestor in the infinite binary tree labelled from 1."""
    _check_tree_label(a)
    _check_tree_label(b)
    while a != b:
        if a > b:
            a >>= 1
        else:
            b >>= 1
    return a


def tree_distance(src: int, dest: int) -> int:
    """Number of edges between two nodes of the infinite binary tree."""
    ancestor = lowest_common_ancestor(src, dest)
    ancestor_level = ancestor.bit_length() - 1
    return (src.bit_length() - 1 - ancestor_level) + (dest.bit_length() - 1 - ancestor_level)


def reverse_digits(n: int) -> int:
    """Decimal digits of ``n`` in reverse order, leading zeros dropped."""
    if n < 0:
        raise ValueError("number must be non-negative")
    return int(str(n)[::-1])


def add_reversed(a: int, b: int) -> int:
    """Reverse both numbers, add them and reverse the sum."""
    return reverse_digits(reverse_digits(a) + reverse_digits(b))


def proper_divisor_sum(n: int) -> int:
    """Sum of the divisors of ``n`` smaller than ``n``, counting 1."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    for k in range(2, math.isqrt(n) + 1):
        if n % k == 0:
            total += k
            if k != n // k:
                total += n // k
    return total


def factorial(n: int) -> int:
    """n! computed exactly."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.factorial(n)


def find_duplicate(values: Sequence[int]) -> int:
    """The repeated value in a sequence holding 1..n-1 plus one duplicate."""
    count = len(values)
    if count < 2:
        raise ValueError("need at least two values")
    return sum(values) - (count - 1) * count // 2


def max_ones_after_flip(bits: Iterable[int]) -> int:
    """Most ones obtainable after flipping one contiguous run of bits."""
    ones = 0
    best_gain = 0
    gain = 0
    for bit in bits:
        if bit not in (0, 1):
            raise ValueError("bits must be 0 or 1")
        ones += bit
        gain = max(0, gain + (1 if bit == 0 else -1))
        best_gain = max(best_gain, gain)
    return ones + best_gain


def count_chessboard_squares(n: int) -> int:
    """Number of squares of every size on an n by n board."""
    if n < 1:
        raise ValueError("board size must be positive")
    return sum(size * size for size in range(1, n + 1))


def _concatenation_order(x: str, y: str) -> int:
    xy, yx = x + y, y + x
    if xy > yx:
        return -1
    if xy < yx:
        return 1
    return 0


def largest_number(values: Iterable[int]) -> str:
    """The largest number formed by concatenating the values in some order."""
    return "".join(sorted((str(v) for v in values), key=cmp_to_key(_concatenation_order)))


def plus_one(digits: Iterable[int]) -> list[int]:
    """Digits of the number given by ``digits`` plus one, without leading zeros."""
    digit_list = list(digits)
    if not digit_list:
        raise ValueError("need at least one digit")
    if any(not 0 <= d <= 9 for d in digit_list):
        raise ValueError("digits must be between 0 and 9")
    value = int("".join(str(d) for d in digit_list)) + 1
    return [int(c) for c in str(value)]