"""Student records looked up by ID in a hash map."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Student:
    """A student's name and course marks."""

    name: str
    data_structure: int
    linear_algebra: int
    database_systems: int


def default_records() -> dict[int, Student]:
    """Return the built-in student records keyed by ID."""
    return {
        101: Student("Mobeen", 85, 90, 78),
        102: Student("Babar", 92, 88, 95),
        103: Student("Usman", 78, 85, 80),
    }


def describe(student: Student) -> str:
    """Return the student's name and marks, one per line."""
    return (
        f"Student Name: {student.name}\n"
        f"Data Structure: {student.data_structure}\n"
        f"Linear Algebra: {student.linear_algebra}\n"
        f"Database Systems: {student.database_systems}\n"
    )


def lookup(records: Mapping[int, Student], student_id: int) -> Student:
    """Return the student with ``student_id``; raise KeyError if unknown."""
    try:
        return records[student_id]
    except KeyError:
        raise KeyError(student_id) from None


def main(argv: list[str] | None = None) -> int:
    """Look up a student by ID, asking for it on standard input if not given."""
    parser = argparse.ArgumentParser(
        prog="structkit-students",
        description="Show a student's marks by ID.",
    )
    parser.add_argument("student_id", nargs="?", type=int, help="student ID")
    args = parser.parse_args(argv)

    student_id = args.student_id
    if student_id is None:
        sys.stdout.write("Enter the student ID to get information: ")
        sys.stdout.flush()
        text = sys.stdin.readline().strip()
        try:
            student_id = int(text)
        except ValueError:
            student_id = None

    try:
        if student_id is None:
            raise KeyError(text)
        student = lookup(default_records(), student_id)
    except KeyError:
        sys.stdout.write("Student not found.\n")
        return 1
    sys.stdout.write(describe(student))
    return 0


if __name__ == "__main__":
    sys.exit(main())