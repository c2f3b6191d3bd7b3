"""A fixed-capacity LIFO stack."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

from basicds.linked_list import _checked_capacity, _spaced

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in first-out stack with a size limit."""

    def __init__(self, capacity: int = 1000) -> None:
        self._capacity = _checked_capacity(capacity, 0)
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __str__(self) -> str:
        return _spaced(self)

    def push(self, item: T) -> None:
        """Put an item on top."""
        if len(self._items) >= self._capacity:
            raise IndexError("stack overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise IndexError("Empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items