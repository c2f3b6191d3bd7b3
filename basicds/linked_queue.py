"""An unbounded FIFO queue built from linked nodes."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from basicds.linked_list import LinkedList, _spaced

T = TypeVar("T")


class LinkedQueue(Generic[T]):
    """First-in first-out queue with no size limit."""

    def __init__(self) -> None:
        self._nodes: LinkedList[T] = LinkedList()

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __str__(self) -> str:
        return _spaced(self)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        self._nodes.push_back(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("dequeue is not valid for empty queue")
        return self._nodes.pop_front()

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._nodes.is_empty()