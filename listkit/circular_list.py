"""A singly linked list whose last node links back to the first."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

EMPTY_MESSAGE = "DS rong!\n"


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: _Node[T] = self


class CircularLinkedList(Generic[T]):
    """A ring of values reached through its tail; the head follows the tail."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._tail: _Node[T] | None = None
        self._size = 0
        for item in reversed(list(items or ())):
            self.insert_first(item)

    def __iter__(self) -> Iterator[T]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size

    def insert_first(self, value: T) -> None:
        """Put ``value`` at the front of the ring."""
        node = _Node(value)
        if self._tail is None:
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def delete_first(self) -> T:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        head.next = head
        self._size -= 1
        return head.value

    def clear(self) -> None:
        """Drop every value."""
        self._tail = None
        self._size = 0

    def format(self) -> str:
        """Return the values separated by spaces, or a notice if empty."""
        if self._tail is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in self) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Build a small ring, print it, empty it and print it again."""
    ring: CircularLinkedList[int] = CircularLinkedList()
    for value in (1, 3, 5, 4):
        ring.insert_first(value)
    print(ring.format(), end="")
    ring.clear()
    print(ring.format(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())