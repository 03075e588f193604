"""In-place selection and insertion sorts, with a timing command."""

from __future__ import annotations

import argparse
import sys
import time
from bisect import bisect_right
from collections.abc import MutableSequence
from typing import Any

DEFAULT_SIZE = 100000


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remaining."""
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        value = items[i]
        position = bisect_right(items, value, 0, i)
        if position != i:
            del items[i]
            items.insert(position, value)


def main(argv: list[str] | None = None) -> int:
    """Time a selection sort of a descending sequence."""
    parser = argparse.ArgumentParser(description="Time a selection sort.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    items = list(range(args.size, 0, -1))

    start = int(time.time())
    print(time.ctime(start) + "\n")
    selection_sort(items)
    end = int(time.time())
    print(time.ctime(end) + "\n")
    print(end - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())