"""A minimal singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from algonotes.sequences import format_row


@dataclass
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Node | None = None


class LinkedList:
    """A singly linked list built from an iterable of values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, target: object) -> bool:
        return any(value == target for value in self)

    def __str__(self) -> str:
        return format_row(self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"