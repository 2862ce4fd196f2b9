"""Small implementations of sorting, searching, bit tricks, number curiosities,
a linked list and a bounded stack."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "linked_list",
    "numbers",
    "recursion",
    "sequences",
    "sorting",
    "stacks",
    "timing",
]