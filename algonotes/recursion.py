"""Small recursive classics: countdowns, factorials and Fibonacci numbers."""

from __future__ import annotations

from collections.abc import Iterator


def countdown(n: int) -> Iterator[int]:
    """Yield n, n-1, ..., 1; nothing when n < 1."""
    while n >= 1:
        yield n
        n -= 1


def factorial(n: int) -> int:
    """Return n! for n >= 0."""
    if n < 0:
        raise ValueError("factorial is defined for n >= 0")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("fibonacci is defined for n >= 0")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current