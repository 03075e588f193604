# listkit

This package implements the classic list structures as plain Python classes.
It also has a small toolkit for student records.

- `listkit.array_list.ArrayList` holds students in order, up to a fixed
  capacity (20 by default). You can insert and delete at a position, look a
  student up by id and sort with a three-way comparator.
- `listkit.linked_list.LinkedList` is a generic singly linked list with head
  and tail. You can insert at the front, at the back, after the first value
  that matches a predicate, or in ascending order. You can delete at either
  end or delete the first value that matches, find a value and sort the list.
- `listkit.doubly_linked_list.DoublyLinkedList` is a generic doubly linked
  list. You can walk it forwards and backwards, test membership, insert after
  a value, remove a value and find its extremum.
- `listkit.circular_list.CircularLinkedList` is a circular singly linked list.
  You can insert and delete at the front.
- `listkit.polynomial.Polynomial` keeps `Term`s in descending order of
  exponent. If you add a term whose exponent is already present, the new term
  replaces the old one's coefficient.
- `listkit.sorting` provides the in-place `selection_sort` and
  `insertion_sort`.
- `listkit.student` provides `Student` records, a parser for the
  `#`-separated record format and comparators for sorting.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Student records

Each record takes one line with five fields separated by `#`:

- the integer id
- the full name
- the date of birth, at most 10 characters
- the home town
- the average score

```
2018001#Nguyen Van An#01/02/2000#Ha Noi#8.5
2018002#Tran Thi Binh#15/07/2000#Hue#7.25
```

`parse_students` parses such text and `read_students` reads it from a file.
Both skip blank lines. A malformed line raises `ValueError`, and the message
gives the line number. `Student.format()` returns a student as a framed block
of labelled lines.

```python
from listkit.student import read_students, compare_by_name_asc
from listkit.array_list import ArrayList

students = read_students("SinhVien.txt")

roster = ArrayList(20)
for student in students:
    roster.insert(student, len(roster))

roster.sort(compare_by_name_asc)
print(roster.format())

position = roster.index_of(2018002)
removed = roster.delete(position)
```

`ArrayList` raises these errors:

- `insert` raises `IndexError` for a position outside `0..len` and
  `OverflowError` when the list is full.
- `delete` raises `IndexError` for a bad position.
- `index_of` raises `ValueError` when no student has the id.

The comparators `compare_by_id_asc`, `compare_by_id_desc` and
`compare_by_name_asc` return a negative number, zero or a positive number,
the same way a three-way comparison does.

## Linked lists

```python
from operator import attrgetter
from listkit.linked_list import LinkedList
from listkit.doubly_linked_list import DoublyLinkedList, is_max, is_min
from listkit.circular_list import CircularLinkedList

numbers = LinkedList([5, 1, 4])
numbers.insert_first(9)
numbers.insert_last(2)
numbers.sort()                        # natural order, or pass a comparator
numbers.insert_ordered(3)             # optional key=... for records
numbers.insert_after(lambda v: v == 4, 7)
numbers.remove(lambda v: v == 9)
print(list(numbers), numbers.find(lambda v: v > 4))

doubly = DoublyLinkedList([1, 6, 4, 2, 3])
doubly.remove(4)
print(list(doubly), list(reversed(doubly)), 6 in doubly)
print(doubly.find_extremum(is_max), doubly.find_extremum(is_min))

ring = CircularLinkedList([1, 3, 5, 4])
ring.insert_first(7)
print(ring.format())
```

Each list has a `format()` method that returns its values separated by
spaces. On an empty list it returns a short notice instead.
`DoublyLinkedList.format(reverse=True)` walks the list from the tail. These
operations raise errors:

- Deleting from an empty list raises `IndexError`.
- Inserting after a value that is not present raises `ValueError`.
- Removing a value that is not present raises `ValueError`.
- Asking an empty list for its extremum raises `ValueError`.

## Polynomials

```python
from listkit.polynomial import Polynomial

f = Polynomial()
f.add_term(2, 3)
f.add_term(3, 2)
f.add_term(2, 1)
f.add_term(9, 2)   # replaces the coefficient of x^2
print(f.format())  # f(x) = 2x^3 + 9x^2 + 2x^1
f.remove(1)
```

`remove` raises `ValueError` when no term has the exponent you give.

## Sorting

```python
from listkit.sorting import selection_sort, insertion_sort

data = [5, 3, 8, 1]
selection_sort(data)
```

## Commands

Each command runs a short demonstration. Their printed headings are in
Vietnamese.

- `listkit-students [PATH]` reads a student file into an array list, sorts
  it by name and prints it. `PATH` defaults to `SinhVien.txt`. If the file is
  missing, the command prints an empty list.
- `listkit-linked-students [PATH]` reads a student file into a linked list,
  putting each record at the front. It prints the list, sorts it by id and
  prints it again. It then inserts a record with id 201 in order and prints
  the result.
- `listkit-polynomial` builds a sample polynomial and prints it.
- `listkit-circular` fills a circular list, prints it, clears it and prints
  it again.
- `listkit-doubly` fills a doubly linked list and removes a value. It prints
  the list in both directions, then prints its largest value.
- `listkit-sort-timing [--size N]` times a selection sort of a list of
  integers in descending order. `N` defaults to 100000.

## What it does not do

The package has no interactive prompt for typing in student records. Records
come from a file in the format above or are built in code. It also does not
save or write records back to a file.