"""Adding a student or editing one: form values and dialog texts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from examseating.models import Student

FIRST_GRADE = 9
FIRST_SECTION = "A"
SUCCESS_TITLE = "İşlem Başarılı"


class EditorMode(Enum):
    """Whether the editor adds a new student or edits an existing one."""

    ADD = 0
    EDIT = 1


def header_text(mode: EditorMode) -> str:
    """Header and window title of the editor."""
    return "Yeni Öğrenci Ekle" if mode is EditorMode.ADD else "Öğrenci Bilgilerini Düzenle"


def error_title(mode: EditorMode) -> str:
    """Title of the error messages shown by the editor."""
    if mode is EditorMode.ADD:
        return "Öğrenci Eklemede Hata Oluştu"
    return "Öğrenci Bilgisi Düzenlemede Hata Oluştu"


def success_message(mode: EditorMode) -> str:
    """Message shown after the student was saved."""
    prefix = "Yeni öğrenci ekleme " if mode is EditorMode.ADD else "Öğrenci bilgilerini düzenleme "
    return prefix + "işlemi başarılı."


@dataclass
class StudentForm:
    """The editor's fields; grade and section are selector indexes."""

    id: int = 0
    first_name: str = ""
    last_name: str = ""
    grade_index: int = 0
    section_index: int = 0

    def __post_init__(self) -> None:
        if self.grade_index < 0:
            raise ValueError(f"grade index must not be negative, got {self.grade_index}")
        if self.section_index < 0:
            raise ValueError(f"section index must not be negative, got {self.section_index}")

    @classmethod
    def from_student(cls, student: Student) -> "StudentForm":
        """Fill the form from a student; grade 9 and section A are the first entries."""
        if not student.section:
            raise ValueError("the student has no section")
        return cls(
            id=student.id,
            first_name=student.first_name,
            last_name=student.last_name,
            grade_index=student.grade - FIRST_GRADE,
            section_index=ord(student.section[0]) - ord(FIRST_SECTION),
        )

    @property
    def grade(self) -> int:
        return self.grade_index + FIRST_GRADE

    @property
    def section(self) -> str:
        return chr(ord(FIRST_SECTION) + self.section_index)

    def to_fields(self) -> tuple[int, str, str, int, str]:
        """The values to save: id, first name, last name, grade and section."""
        return self.id, self.first_name, self.last_name, self.grade, self.section