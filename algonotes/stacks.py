"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack(Generic[T]):
    """A last-in first-out stack holding at most *capacity* items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Add *item* on top; raises StackFullError at capacity."""
        if len(self._items) >= self.capacity:
            raise StackFullError("stack overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raises StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"