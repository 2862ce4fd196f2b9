"""Elementary number-theory and numerical experiments."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Iterable


def is_armstrong(n: int) -> bool:
    """True if *n* equals the sum of its digits raised to the digit count."""
    if n < 0:
        raise ValueError("Armstrong numbers are defined for n >= 0")
    digits = str(n)
    width = len(digits)
    return sum(int(d) ** width for d in digits) == n


def armstrong_numbers(limit: int = 1000) -> list[int]:
    """Return every Armstrong number from 0 to *limit* inclusive."""
    return [i for i in range(limit + 1) if is_armstrong(i)]


def prime_factorization(n: int) -> dict[int, int]:
    """Return the prime factors of *n* mapped to their exponents."""
    if n < 1:
        raise ValueError("factorization needs a positive integer")
    factors: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


_SQRT5 = math.sqrt(5)
_PHI = (1 + _SQRT5) / 2
_PSI = (1 - _SQRT5) / 2


def fibonacci_binet(n: int) -> int:
    """Return the n-th Fibonacci number using Binet's closed form."""
    return int(round((_PHI ** n - _PSI ** n) / _SQRT5))


def modes(values: Iterable[int]) -> list[int]:
    """Return the most frequent values, in the order they reached that count."""
    counts: Counter[int] = Counter()
    best = 0
    result: list[int] = []
    for value in values:
        counts[value] += 1
        freq = counts[value]
        if freq > best:
            best = freq
            result = []
        if freq == best:
            result.append(value)
    return result


def power_of_two_bounds(max_exponent: int = 9) -> list[tuple[int, int]]:
    """For y = 1..max_exponent, pair y with the least x such that 2**x >= 10**y."""
    bounds = []
    x, value = 1, 2
    for y in range(1, max_exponent + 1):
        target = 10 ** y
        while value < target:
            value *= 2
            x += 1
        bounds.append((y, x))
    return bounds


def taxicab_numbers(limit: int = 100_000) -> dict[int, list[tuple[int, int]]]:
    """Map each sum of two cubes below *limit* with several representations
    to its (a, b) pairs, a <= b, in increasing order of the sum."""
    sums: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    a = 1
    while a ** 3 < limit:
        b = a
        while a ** 3 + b ** 3 < limit:
            sums[a ** 3 + b ** 3].append((a, b))
            b += 1
        a += 1
    return {total: pairs for total, pairs in sorted(sums.items()) if len(pairs) > 1}


def newton_sqrt(x: float, guess: float = 10.0) -> float:
    """Approximate sqrt(x) by repeated averaging of guess and x / guess."""
    if x <= 0:
        raise ValueError("x must be positive")
    if guess == 0:
        raise ValueError("guess must be non-zero")
    g = float(guess)
    while abs((x - g * g) / x) >= 1e-10:
        g = (g + x / g) / 2
    return g


def hanoi_moves(height: int) -> int:
    """Return the number of moves needed for a Tower of Hanoi of *height* discs."""
    if height < 0:
        raise ValueError("height must not be negative")
    return (1 << height) - 1


def vedic_sqrt(x: int) -> float:
    """Estimate sqrt(x) as r + (x - r*r) / (2r), with r = floor(sqrt(x))."""
    if x < 1:
        raise ValueError("x must be at least 1")
    root = math.isqrt(x)
    return root + (x - root * root) / 2 / root


def vedic_deviations(
    limit: int = 100_000, threshold: float = 5.0
) -> list[tuple[int, float]]:
    """Return (x, percent deviation) for 1 <= x < limit where the estimate
    deviates by more than *threshold* percent, largest deviation first."""
    found = []
    for x in range(1, limit):
        estimate = vedic_sqrt(x)
        deviation = abs(estimate - math.sqrt(x)) / estimate * 100
        if deviation > threshold:
            found.append((deviation, x))
    found.sort(reverse=True)
    return [(x, deviation) for deviation, x in found]