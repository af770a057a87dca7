"""Students, exam seats and desk positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from examseating.hall import Hall

DESKS_PER_ROW = 6


@dataclass
class Student:
    """A student as stored in the school database."""

    id: int = 0
    first_name: str = ""
    last_name: str = ""
    grade: int = 0
    section: str = ""


@dataclass
class ExamStudent(Student):
    """A student placed in an exam hall; ordered by school number."""

    hall_name: str = ""
    desk_index: int = 0

    @classmethod
    def from_student(cls, student: Student) -> "ExamStudent":
        """Create an exam seat record carrying the student's identity."""
        return cls(
            id=student.id,
            first_name=student.first_name,
            last_name=student.last_name,
            grade=student.grade,
            section=student.section,
        )

    def __lt__(self, other: "ExamStudent") -> bool:
        if not isinstance(other, ExamStudent):
            return NotImplemented
        return self.id < other.id


@dataclass
class Desk:
    """A single desk in a hall; it may be missing or occupied."""

    student: Optional[ExamStudent] = None
    exists: bool = True
    is_empty: bool = True


@dataclass(eq=False)
class DeskCoordinates:
    """The position of a desk inside a particular hall."""

    hall: "Hall"
    row: int
    col: int

    @classmethod
    def from_index(cls, hall: "Hall", desk_index: int) -> "DeskCoordinates":
        """Build coordinates from a 1-based desk number, six desks per row."""
        if desk_index < 1:
            raise ValueError(f"desk index must be at least 1, got {desk_index}")
        row, col = divmod(desk_index - 1, DESKS_PER_ROW)
        return cls(hall, row, col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeskCoordinates):
            return NotImplemented
        return self.hall is other.hall and self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((id(self.hall), self.row, self.col))