"""Steps for importing many students of one class from a spreadsheet."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence

from examseating.models import Student

FIRST_GRADE = 9
FILE_FILTERS = (
    "E-Okul Excel - Sadece Veri (*.XLS *.xls)",
    "Elle Oluşturulmuş Excel Dosyası (*.XLSX *.xlsx)",
)
SPINNER_TITLE = "Excel Dosyası Okunuyor"
ERROR_TITLE = "Excel'den Öğrenci Eklerken Hata Oluştu"


class ImportPage(IntEnum):
    """The pages of the import wizard, in order."""

    FILE_PICKER = 0
    SPINNER = 1
    CLASS_PICKER = 2
    PREVIEW = 3


def grade_from_index(index: int) -> int:
    """Map the grade selector's index to a grade; the first entry is grade 9."""
    if index < 0:
        raise ValueError(f"grade index must not be negative, got {index}")
    return index + FIRST_GRADE


def class_picker_description(template: str, n_parsed: int) -> str:
    """Fill the number of read students into the class picker text."""
    return template.replace("<n>", str(n_parsed))


def preview_description(template: str, students: Sequence[Student]) -> str:
    """Fill the count, grade and section of the imported students into a text."""
    if not students:
        raise ValueError("there are no students to preview")
    first = students[0]
    return (
        template.replace("<n>", str(len(students)))
        .replace("<g>", str(first.grade))
        .replace("<s>", first.section)
    )


class ImportWizard:
    """Moves through file picking, reading, class picking and preview."""

    def __init__(self) -> None:
        self.page = ImportPage.FILE_PICKER
        self.parsed_students: Optional[list[Student]] = None
        self.accepted = False

    def next_page(self) -> None:
        """Advance one page; on the preview page the import is accepted."""
        if self.page is ImportPage.PREVIEW:
            self.accepted = True
            return
        if self.page is ImportPage.SPINNER and self.parsed_students is None:
            raise RuntimeError("no students have been read yet")
        self.page = ImportPage(self.page + 1)

    def prev_page(self) -> None:
        """Go back one page, never stopping on the reading spinner."""
        if self.page is ImportPage.FILE_PICKER:
            return
        page = ImportPage(self.page - 1)
        self.page = ImportPage.FILE_PICKER if page is ImportPage.SPINNER else page

    def handle_parsed(self, students: Optional[Sequence[Student]]) -> None:
        """Take the students read from the file; None means reading failed."""
        if self.page is not ImportPage.SPINNER:
            raise RuntimeError(f"not waiting for a file, on page {self.page.name}")
        self.parsed_students = None if students is None else list(students)
        if self.parsed_students is None:
            self.prev_page()
        else:
            self.next_page()

    def apply_grade_and_section(self, grade: int, section: str) -> None:
        """Put every read student into the chosen class and show the preview."""
        if self.page is not ImportPage.CLASS_PICKER or self.parsed_students is None:
            raise RuntimeError("a class can only be chosen after students were read")
        for student in self.parsed_students:
            student.grade = grade
            student.section = section
        self.next_page()

    def confirm(self, population_before: int, population_after: int) -> tuple[str, str]:
        """Report how many students were added, accept the wizard and return (title, message)."""
        if self.page is not ImportPage.PREVIEW or self.parsed_students is None:
            raise RuntimeError("nothing to confirm before the preview")
        total = len(self.parsed_students)
        added = population_after - population_before
        if added == total:
            result = ("Başarılı", f"{added} öğrenci başarıyla veri tabanına eklendi.")
        else:
            result = (
                "Kısmen Başarılı",
                f"Excel dosyasından okunan {total} öğrenciden {added} öğrenci veri tabanına "
                f"eklendi, {total - added} öğrencide hata oluştuğu için veri tabanına eklenemedi.",
            )
        self.next_page()
        return result