"""A doubly linked list that can be walked from either end."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

EMPTY_MESSAGE = "DS rong!\n"


class _Node(Generic[T]):
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: _Node[T] | None = None
        self.prev: _Node[T] | None = None


def is_max(a: Any, b: Any) -> bool:
    """True when ``a`` beats ``b`` as a maximum."""
    return a > b


def is_min(a: Any, b: Any) -> bool:
    """True when ``a`` beats ``b`` as a minimum."""
    return a < b


class DoublyLinkedList(Generic[T]):
    """Values linked in both directions, with head and tail references."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for item in items or ():
            self.insert_last(item)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _search(self, key: T) -> _Node[T] | None:
        return next((node for node in self._nodes() if node.value == key), None)

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._search(key) is not None  # type: ignore[arg-type]

    def insert_first(self, value: T) -> None:
        """Put ``value`` at the front."""
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_last(self, value: T) -> None:
        """Put ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, key: T, value: T) -> None:
        """Insert ``value`` right after the first value equal to ``key``."""
        target = self._search(key)
        if target is None:
            raise ValueError(f"{key!r} is not in the list")
        if target is self._tail:
            self.insert_last(value)
            return
        node = _Node(value)
        node.next = target.next
        target.next.prev = node
        target.next = node
        node.prev = target
        self._size += 1

    def delete_first(self) -> T:
        """Remove and return the first value."""
        head = self._head
        if head is None:
            raise IndexError("delete from empty list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        head.next = None
        self._size -= 1
        return head.value

    def delete_last(self) -> T:
        """Remove and return the last value."""
        tail = self._tail
        if tail is None:
            raise IndexError("delete from empty list")
        self._tail = tail.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        tail.prev = None
        self._size -= 1
        return tail.value

    def remove(self, key: T) -> None:
        """Remove the first value equal to ``key``."""
        target = self._search(key)
        if target is None:
            raise ValueError(f"{key!r} is not in the list")
        if target is self._head:
            self.delete_first()
            return
        if target is self._tail:
            self.delete_last()
            return
        target.prev.next = target.next
        target.next.prev = target.prev
        target.next = target.prev = None
        self._size -= 1

    def find_extremum(self, better: Callable[[T, T], bool] = is_max) -> T:
        """Return the value that ``better`` prefers over all others."""
        values = iter(self)
        try:
            best = next(values)
        except StopIteration:
            raise ValueError("extremum of empty list") from None
        for value in values:
            if better(value, best):
                best = value
        return best

    def clear(self) -> None:
        """Drop every value."""
        self._head = self._tail = None
        self._size = 0

    def format(self, reverse: bool = False) -> str:
        """Return the values separated by spaces, from the tail if ``reverse``."""
        if self._head is None:
            return EMPTY_MESSAGE
        values = reversed(self) if reverse else iter(self)
        return "".join(f"{value} " for value in values) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Build a sample list, remove one value and print it both ways."""
    values: DoublyLinkedList[int] = DoublyLinkedList()
    for value in (1, 6, 4, 2, 3):
        values.insert_last(value)
    values.remove(4)
    print(values.format(), end="")
    print(values.format(reverse=True), end="")
    print(values.find_extremum())
    values.clear()
    print(values.format(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())