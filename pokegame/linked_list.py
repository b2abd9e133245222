"""A singly linked list with positional insert and removal."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T, next_node: "Optional[_Node[T]]" = None) -> None:
        self.item = item
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list keeping front and back references."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def _node_at(self, position: int) -> _Node[T]:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert(self, position: int, item: T) -> None:
        """Insert ``item`` so that it ends up at ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"insert position {position} out of range")
        if position == 0:
            node = _Node(item, self._head)
            self._head = node
            if self._size == 0:
                self._tail = node
        else:
            previous = self._node_at(position - 1)
            node = _Node(item, previous.next)
            previous.next = node
            if position == self._size:
                self._tail = node
        self._size += 1

    def append(self, item: T) -> None:
        """Add ``item`` at the back."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self, position: int) -> T:
        """Remove and return the item at ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            removed = self._head
            self._head = removed.next
            if self._size == 1:
                self._tail = None
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.item

    def __getitem__(self, position: int) -> T:
        position = operator.index(position)
        if position < 0:
            position += self._size
        if not 0 <= position < self._size:
            raise IndexError("list index out of range")
        return self._node_at(position).item

    def find(self, target: Any, compare: Callable[[Any, T], int]) -> Optional[T]:
        """First item for which ``compare(target, item)`` is 0, else None."""
        for item in self:
            if compare(target, item) == 0:
                return item
        return None

    def for_each(self, func: Callable[[T], bool]) -> int:
        """Apply ``func`` in order until it returns false.

        Returns how many items ``func`` accepted.
        """
        accepted = 0
        for item in self:
            if not func(item):
                break
            accepted += 1
        return accepted

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"