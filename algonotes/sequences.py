"""Small utilities for integer sequences, matrices and mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import accumulate


def parse_ints(text: str) -> list[int]:
    """Return every whitespace-separated integer in *text*.

    Raises ValueError if a token is not an integer.
    """
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"not a list of integers: {exc}") from None


def format_row(values: Iterable[object]) -> str:
    """Render values as a tab-terminated row, e.g. ``"1\\t2\\t"``."""
    return "".join(f"{value}\t" for value in values)


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of *values*."""
    return list(accumulate(values))


def reverse(values: Iterable[int]) -> list[int]:
    """Return a reversed copy of *values*."""
    return list(values)[::-1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Rotate *values* right by *k* positions.

    Raises ValueError for an empty sequence.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def max_element(values: Iterable[int]) -> int:
    """Return the largest value; raises ValueError when empty."""
    items = list(values)
    if not items:
        raise ValueError("max_element of an empty sequence")
    return max(items)


def parse_matrix(text: str) -> list[list[int]]:
    """Parse ``rows cols`` followed by ``rows * cols`` integers, row by row."""
    numbers = parse_ints(text)
    if len(numbers) < 2:
        raise ValueError("matrix dimensions are missing")
    rows, cols = numbers[0], numbers[1]
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    cells = numbers[2:]
    if len(cells) < rows * cols:
        raise ValueError(
            f"expected {rows * cols} matrix elements, got {len(cells)}"
        )
    return [cells[r * cols:(r + 1) * cols] for r in range(rows)]


def format_matrix(rows: Iterable[Iterable[object]]) -> str:
    """Render a matrix with one tab-terminated row per line."""
    return "".join(format_row(row) + "\n" for row in rows)


def column_major_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a rows x cols matrix filled with 1, 2, ... down each column."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[c * rows + r + 1 for c in range(cols)] for r in range(rows)]


def format_mapping(mapping: Mapping[object, object]) -> str:
    """Render key/value pairs in key order, one ``key\\tvalue`` per line."""
    return "".join(f"{key}\t{mapping[key]}\n" for key in sorted(mapping))