"""A generic singly linked list with head and tail references."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from operator import attrgetter
from typing import Any, Generic, TypeVar

from .student import Student, compare_by_id_asc, read_students

T = TypeVar("T")

EMPTY_MESSAGE = "Danh sach rong!\n"
DEFAULT_FILE = "SinhVien.txt"


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: _Node[T] | None = None


def _natural_order(first: Any, second: Any) -> int:
    return (first > second) - (first < second)


class LinkedList(Generic[T]):
    """Values linked one after another, with constant-time access to both ends."""

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

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def insert_first(self, value: T) -> None:
        """Put ``value`` at the front."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def insert_last(self, value: T) -> None:
        """Put ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def _insert_after_node(self, node: _Node[T], value: T) -> None:
        new = _Node(value)
        new.next = node.next
        if node is self._tail:
            self._tail = new
        node.next = new
        self._size += 1

    def _find_node(self, predicate: Callable[[T], bool]) -> _Node[T] | None:
        return next((node for node in self._nodes() if predicate(node.value)), None)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first value matching ``predicate``, or None."""
        node = self._find_node(predicate)
        return None if node is None else node.value

    def insert_after(self, predicate: Callable[[T], bool], value: T) -> None:
        """Insert ``value`` right after the first value matching ``predicate``."""
        node = self._find_node(predicate)
        if node is None:
            raise ValueError("no matching value to insert after")
        self._insert_after_node(node, value)

    def insert_ordered(
        self, value: T, key: Callable[[T], Any] | None = None
    ) -> None:
        """Insert ``value`` into a list kept in ascending order of ``key``."""

        def rank(item: T) -> Any:
            return item if key is None else key(item)

        wanted = rank(value)
        if self._head is None or rank(self._head.value) > wanted:
            self.insert_first(value)
            return
        node = self._head
        while node.next is not None and rank(node.next.value) < wanted:
            node = node.next
        self._insert_after_node(node, value)

    def delete_first(self) -> T:
        """Remove and return the first value."""
        head = self._head
        if head is None:
            raise IndexError("delete from empty list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        head.next = None
        self._size -= 1
        return head.value

    def delete_last(self) -> T:
        """Remove and return the last value."""
        tail = self._tail
        if tail is None:
            raise IndexError("delete from empty list")
        if self._head is tail:
            self._head = self._tail = None
        else:
            prev = self._head
            while prev.next is not tail:
                prev = prev.next
            prev.next = None
            self._tail = prev
        self._size -= 1
        return tail.value

    def remove(self, predicate: Callable[[T], bool]) -> T:
        """Remove and return the first value matching ``predicate``."""
        prev: _Node[T] | None = None
        for node in self._nodes():
            if predicate(node.value):
                break
            prev = node
        else:
            raise ValueError("no matching value to remove")
        if prev is None:
            return self.delete_first()
        if node is self._tail:
            return self.delete_last()
        prev.next = node.next
        node.next = None
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Drop every value."""
        self._head = self._tail = None
        self._size = 0

    def sort(self, comparator: Callable[[T, T], int] | None = None) -> None:
        """Sort in place by exchanging values between nodes."""
        compare = comparator or _natural_order
        for outer in self._nodes():
            inner = outer.next
            while inner is not None:
                if compare(inner.value, outer.value) < 0:
                    outer.value, inner.value = inner.value, outer.value
                inner = inner.next

    def format(self) -> str:
        """Return the values separated by spaces, or a notice if empty."""
        if self.is_empty():
            return EMPTY_MESSAGE
        return "".join(f"{value} " for value in self) + "\n"


def _print_students(students: LinkedList[Student]) -> None:
    if students.is_empty():
        print("DS rong!")
    else:
        print("".join(student.format() for student in students), end="")


def main(argv: list[str] | None = None) -> int:
    """Load students, sort them by id and insert one in order."""
    parser = argparse.ArgumentParser(description="Sort students by id.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    try:
        loaded = read_students(args.path)
    except FileNotFoundError:
        loaded = []
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    students: LinkedList[Student] = LinkedList()
    for student in loaded:
        students.insert_first(student)
    _print_students(students)

    print("=================SAP XEP===================")
    students.sort(compare_by_id_asc)
    _print_students(students)

    print("=================THEM VAO DS CO THU TU===================")
    students.insert_ordered(Student(201), key=attrgetter("student_id"))
    _print_students(students)

    students.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())