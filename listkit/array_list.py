"""A fixed-capacity array list of students."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import combinations

from .student import Student, compare_by_name_asc, read_students

MAX_CAPACITY = 20
DEFAULT_FILE = "SinhVien.txt"
EMPTY_MESSAGE = "Danh sach rong!\n"

Comparator = Callable[[Student, Student], int]


class ArrayList:
    """Students held in order, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Student] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Student:
        return self._items[index]

    def insert(self, student: Student, position: int = 0) -> None:
        """Insert ``student`` at ``position`` (0 to len inclusive)."""
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        if len(self._items) >= self.capacity:
            raise OverflowError(f"list is full ({self.capacity} students)")
        self._items.insert(position, student)

    def delete(self, position: int = 0) -> Student:
        """Remove and return the student at ``position``."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items.pop(position)

    def index_of(self, student_id: int) -> int:
        """Return the position of the first student with ``student_id``."""
        for position, student in enumerate(self._items):
            if student.student_id == student_id:
                return position
        raise ValueError(f"no student with id {student_id}")

    def sort(self, comparator: Comparator = compare_by_name_asc) -> None:
        """Sort in place by exchange: each later element smaller than the
        current one is swapped into its place."""
        items = self._items
        for i, j in combinations(range(len(items)), 2):
            if comparator(items[j], items[i]) < 0:
                items[i], items[j] = items[j], items[i]

    def format(self) -> str:
        """Return every student's block, or a notice if the list is empty."""
        if not self._items:
            return EMPTY_MESSAGE
        return "".join(student.format() for student in self._items)


def main(argv: list[str] | None = None) -> int:
    """Load students from a file, sort them by name and print them."""
    parser = argparse.ArgumentParser(description="Sort students by name.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    students = ArrayList()
    try:
        loaded = read_students(args.path)
    except FileNotFoundError:
        loaded = []
    try:
        for student in loaded:
            students.insert(student, len(students))
    except OverflowError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("-------------SAP XEP DANH SACH------------------")
    students.sort(compare_by_name_asc)
    print(students.format(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())