"""A fixed-capacity queue whose slots are used once and never reclaimed."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

from basicds.linked_list import _checked_capacity, _spaced

T = TypeVar("T")


class ArrayQueue(Generic[T]):
    """Queue backed by an array; each slot is written only once."""

    def __init__(self, capacity: int = 3) -> None:
        self._capacity = _checked_capacity(capacity, 0)
        self._items: List[T] = []
        self._read = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self._items[self._read:])

    def __str__(self) -> str:
        return _spaced(self)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        if self.is_full():
            raise IndexError("queue overflow")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("dequeue is not valid for empty queue")
        self._read += 1
        return self._items[self._read - 1]

    def is_empty(self) -> bool:
        """Return True when nothing is waiting to be dequeued."""
        return self._read == len(self._items)

    def is_full(self) -> bool:
        """Return True when every slot has been written."""
        return len(self._items) >= self._capacity