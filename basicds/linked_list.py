"""A singly linked list with index-based access and in-place reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


def _spaced(items: Iterable[Any]) -> str:
    """Join the string forms of items with single spaces."""
    return " ".join(map(str, items))


def _checked_capacity(capacity: int, minimum: int) -> int:
    """Return capacity, or raise ValueError when it is below minimum."""
    if capacity < minimum:
        raise ValueError(f"capacity must be at least {minimum}")
    return capacity


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list keeping track of its head, tail and length."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return _spaced(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._size == 0

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _require_items(self, message: str) -> None:
        if self._head is None:
            raise IndexError(message)

    def push_back(self, item: T) -> None:
        """Append an item at the end."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, item: T) -> None:
        """Insert an item at the start."""
        self._head = _Node(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        self._require_items("Empty List")
        node = self._head
        assert node is not None
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last item."""
        self._require_items("Empty list")
        if self._size == 1:
            return self.pop_front()
        before = self._node_at(self._size - 2)
        last = self._tail
        assert last is not None
        before.next = None
        self._tail = before
        self._size -= 1
        return last.data

    def front(self) -> T:
        """Return the first item."""
        self._require_items("Empty list")
        assert self._head is not None
        return self._head.data

    def back(self) -> T:
        """Return the last item."""
        self._require_items("Empty list")
        assert self._tail is not None
        return self._tail.data

    def value_at(self, index: int) -> T:
        """Return the item at a zero-based index."""
        if index < 0 or index >= self._size:
            raise IndexError("Given index doesn't exist")
        return self._node_at(index).data

    def insert(self, index: int, item: T) -> None:
        """Insert an item so that it ends up at the given index."""
        if index < 0 or index > self._size:
            raise IndexError("Invalid index insertion")
        if index == 0:
            self.push_front(item)
        elif index == self._size:
            self.push_back(item)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
            self._size += 1

    def remove(self, index: int) -> None:
        """Remove the item at a zero-based index."""
        if index < 0 or index >= self._size:
            raise IndexError("Given index doesn't exist")
        if index == 0:
            self.pop_front()
        elif index == self._size - 1:
            self.pop_back()
        else:
            before = self._node_at(index - 1)
            assert before.next is not None
            before.next = before.next.next
            self._size -= 1

    def value_n_from_end(self, n: int) -> T:
        """Return the n-th item counted from the end, starting at 1."""
        if n <= 0 or n > self._size:
            raise IndexError("Invalid position")
        return self._node_at(self._size - n).data

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node[T]] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def remove_value(self, item: Any) -> None:
        """Remove the first item equal to the given one, if any."""
        for index, value in enumerate(self):
            if value == item:
                self.remove(index)
                return