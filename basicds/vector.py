"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 16


class Vector(Generic[T]):
    """Dynamic array with explicit capacity tracking."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = []
        self._capacity = _INITIAL_CAPACITY
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _check_index(self, index: int, message: str) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError(message)

    def __getitem__(self, index: int) -> T:
        self._check_index(index, "Index is out of range!")
        return self._items[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index, "Index is out of range!")
        self._items[index] = item

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True when the vector holds no items."""
        return not self._items

    def push_back(self, item: T) -> None:
        """Append an item."""
        self._grow_if_full()
        self._items.append(item)

    def at(self, index: int) -> T:
        """Return the item at an index."""
        self._check_index(index, "Index is out of range !")
        return self._items[index]

    def insert(self, index: int, item: T) -> None:
        """Insert an item at an index, shifting later items right."""
        if index < 0 or index > len(self._items):
            raise IndexError("Index is out of range")
        self._grow_if_full()
        self._items.insert(index, item)

    def prepend(self, item: T) -> None:
        """Insert an item at the front."""
        self.insert(0, item)

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop_back operation is not valid for empty array")
        return self._items.pop()

    def delete_index(self, index: int) -> None:
        """Remove the item at an index, shifting later items left."""
        self._check_index(index, "Index is out of range")
        del self._items[index]

    def find(self, item: Any) -> int:
        """Return the index of the first equal item, or -1."""
        for index, value in enumerate(self._items):
            if value == item:
                return index
        return -1

    def remove(self, item: Any) -> None:
        """Remove every item equal to the given one."""
        self._items = [value for value in self._items if value != item]