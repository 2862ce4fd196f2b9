"""Bit-manipulation tricks on integers."""

from __future__ import annotations

from functools import reduce
from operator import xor

_INT_MIN = -(1 << 31)
_MASK32 = (1 << 32) - 1


def count_set_bits(n: int) -> int:
    """Return the number of 1 bits in a non-negative integer."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n.bit_count()


def lowest_set_bit_span(n: int) -> int:
    """Return the 1-based position of the lowest set bit of a positive n."""
    if n <= 0:
        raise ValueError("n must be positive")
    return (n ^ (n - 1)).bit_length()


def is_power_of_two(n: int) -> bool:
    """True if *n* is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_bit_set(n: int, i: int) -> bool:
    """True if bit *i* (0-based) of *n* is set."""
    return bool((n >> i) & 1)


def set_bit(n: int, i: int) -> int:
    """Return *n* with bit *i* set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """Return *n* with bit *i* cleared."""
    return n & ~(1 << i)


def toggle_bit(n: int, i: int) -> int:
    """Return *n* with bit *i* flipped."""
    return n ^ (1 << i)


def clear_lowest_set_bit(n: int) -> int:
    """Return *n* with its rightmost 1 bit turned off."""
    return n & (n - 1)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three XORs."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def josephus_survivor(n: int) -> int:
    """Return the survivor's position when every second of n people is shot."""
    if n < 1:
        raise ValueError("n must be at least 1")
    highest = 1 << (n.bit_length() - 1)
    return 2 * (n - highest) + 1


def negative_bit_total(n: int) -> int:
    """Sum INT_MIN once per set bit of *n* as a 32-bit integer, wrapping
    the total to 32 bits."""
    total = (n & _MASK32).bit_count() * _INT_MIN
    total &= _MASK32
    return total - (1 << 32) if total & (1 << 31) else total


def xor_upto(n: int) -> int:
    """Return 0 ^ 1 ^ ... ^ n for n >= 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    return (n, 1, n + 1, 0)[n % 4]


def range_xor(left: int, right: int) -> int:
    """XOR of left+1, left+3, ... up to right, further XORed with
    xor_upto(right) when right - left is even."""
    answer = reduce(xor, range(left + 1, right + 1, 2), 0)
    if (left - right + 1) % 2:
        answer ^= xor_upto(right)
    return answer