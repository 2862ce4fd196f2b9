"""Searching and classic comparison sorts over integer lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def binary_search(values: Iterable[int], target: int) -> int:
    """Sort a copy of *values* and return the index of *target* in it.

    Returns -1 when *target* is absent.
    """
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    while low <= high:
        mid = (low + high) // 2
        if ordered[mid] == target:
            return mid
        if ordered[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort *values* in place by repeated adjacent swaps."""
    size = len(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(size - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of *values* using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def merge_sort_in_place(values: MutableSequence[int]) -> None:
    """Sort *values* in place, merging adjacent sorted runs back into it."""

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        mid = (low + high) // 2
        sort_range(low, mid)
        sort_range(mid + 1, high)
        values[low:high + 1] = merge(values[low:mid + 1], values[mid + 1:high + 1])

    sort_range(0, len(values) - 1)


def _partition(values: MutableSequence[int], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low + 1, high
    while i <= j:
        if values[i] <= pivot:
            i += 1
        elif values[j] > pivot:
            j -= 1
        else:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort *values* in place with quicksort, using the first element as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort *values* in place by moving each remaining minimum to the front."""
    size = len(values)
    for index in range(size):
        min_index = min(range(index, size), key=values.__getitem__)
        if min_index != index:
            values[index], values[min_index] = values[min_index], values[index]