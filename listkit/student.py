"""Student records and the '#'-separated text format they are stored in."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BIRTH_DATE_WIDTH = 10
FIELD_DELIMITER = "#"
SEPARATOR = "==============================="
_FIELD_COUNT = 5


@dataclass
class Student:
    """One student: id, full name, birth date, hometown and grade average."""

    student_id: int
    name: str = ""
    birth_date: str = ""
    hometown: str = ""
    gpa: float = 0.0

    def __post_init__(self) -> None:
        if len(self.birth_date) > BIRTH_DATE_WIDTH:
            raise ValueError(
                f"birth date {self.birth_date!r} is longer than "
                f"{BIRTH_DATE_WIDTH} characters"
            )

    def format(self) -> str:
        """Return the student as a framed block of labelled lines."""
        return (
            f"{SEPARATOR}\n"
            f"ID: {self.student_id}\n"
            f"Ho va ten: {self.name}\n"
            f"Ngay sinh: {self.birth_date}\n"
            f"Que quan: {self.hometown}\n"
            f"Diem trung binh: {self.gpa:g}\n"
            f"{SEPARATOR}\n"
        )

    def __str__(self) -> str:
        return self.format()


def parse_students(text: str) -> list[Student]:
    """Parse lines of the form ``id#name#birth date#hometown#gpa``.

    Blank lines are skipped. A malformed line raises ValueError.
    """
    students = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        record = line.strip()
        if not record:
            continue
        fields = record.split(FIELD_DELIMITER)
        if len(fields) != _FIELD_COUNT:
            raise ValueError(
                f"line {line_number}: expected {_FIELD_COUNT} fields, "
                f"got {len(fields)}"
            )
        raw_id, name, birth_date, hometown, raw_gpa = fields
        try:
            student_id = int(raw_id)
            gpa = float(raw_gpa)
        except ValueError as exc:
            raise ValueError(f"line {line_number}: {exc}") from exc
        try:
            students.append(Student(student_id, name, birth_date, hometown, gpa))
        except ValueError as exc:
            raise ValueError(f"line {line_number}: {exc}") from exc
    return students


def read_students(path: str | os.PathLike[str]) -> list[Student]:
    """Read and parse a student file, in file order."""
    return parse_students(Path(path).read_text(encoding="utf-8"))


def compare_by_id_asc(first: Student, second: Student) -> int:
    """Negative, zero or positive as ``first`` goes before, with or after ``second`` by id."""
    return first.student_id - second.student_id


def compare_by_id_desc(first: Student, second: Student) -> int:
    """Order by id, highest first."""
    return -(first.student_id - second.student_id)


def compare_by_name_asc(first: Student, second: Student) -> int:
    """Order by full name, alphabetically."""
    return (first.name > second.name) - (first.name < second.name)