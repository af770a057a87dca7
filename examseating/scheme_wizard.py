"""Steps for creating a new exam seating scheme."""

from __future__ import annotations

import datetime
import os
import subprocess
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from examseating.scheme import scheme_path

PREVIEW_ROWS = 6
PREVIEW_COLUMNS = 8
AISLE_COLUMNS = (2, 5)

PREV_TEXT = "  Geri  "
NEXT_TEXT = "  İleri  "
CREATE_TEXT = "  Oluştur  "
OPEN_FOLDER_TEXT = "  Bu sınava ait klasörü aç  "
HOME_TEXT = "  Ana sayfaya dön  "
SPINNER_TITLE = "Sınav düzeni oluşturuluyor. Lütfen bekleyiniz."
ERROR_TITLE = "HATA"
DATE_FORMAT = "%d/%m/%Y"


class SchemePage(IntEnum):
    """The pages of the new scheme wizard, in order."""

    EXAM_INFO = 0
    CLASS_PICKER = 1
    HALL_PICKER = 2
    PREVIEW = 3
    SPINNER = 4
    RESULTS = 5


@dataclass
class ExamInfo:
    """The name and date entered for a new exam."""

    name: str = ""
    date: datetime.date = field(default_factory=datetime.date.today)

    def simplified_name(self) -> str:
        """The name with surrounding whitespace removed and inner runs collapsed."""
        return " ".join(self.name.split())


class SchemeGenerator(Protocol):
    """What the wizard needs from the scheme generator; setters raise on bad input."""

    def set_date(self, date: datetime.date) -> None: ...

    def set_name(self, name: str) -> None: ...

    def set_attending_classes(self, class_names: Sequence[str]) -> None: ...

    def set_exam_halls(self, hall_names: Sequence[str]) -> None: ...

    def preview(self) -> Any: ...


def effective_column(col: int) -> int:
    """Map a preview grid column to a desk column, skipping the two aisles."""
    if not 0 <= col < PREVIEW_COLUMNS:
        raise IndexError(f"column must be between 0 and {PREVIEW_COLUMNS - 1}, got {col}")
    if col in AISLE_COLUMNS:
        raise ValueError(f"column {col} is an aisle")
    if col > AISLE_COLUMNS[1]:
        return col - 2
    if col > AISLE_COLUMNS[0]:
        return col - 1
    return col


def preview_grid(grade_at: Callable[[int, int], int]) -> list[list[str]]:
    """Build the preview table: grades per desk, empty cells for the aisles."""
    return [
        [
            "" if col in AISLE_COLUMNS else str(grade_at(row, effective_column(col)))
            for col in range(PREVIEW_COLUMNS)
        ]
        for row in range(PREVIEW_ROWS)
    ]


def fill_template(template: str, replacements: Mapping[str, object]) -> str:
    """Replace each placeholder in turn with the text of its value."""
    for placeholder, value in replacements.items():
        template = template.replace(placeholder, str(value))
    return template


def _open_in_file_manager(path: str) -> None:
    if sys.platform == "win32":
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


class SchemeWizard:
    """Moves through exam info, class and hall choice, preview, generation and results."""

    def __init__(
        self,
        generator: SchemeGenerator,
        docs_root: str,
        start_generation: Optional[Callable[["SchemeWizard"], object]] = None,
        open_folder: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.generator = generator
        self.docs_root = docs_root
        self.start_generation = start_generation
        self.open_folder = open_folder or _open_in_file_manager

        self.page = SchemePage.EXAM_INFO
        self.exam_info = ExamInfo()
        self.attending_classes: list[str] = []
        self.selected_halls: list[str] = []

        self.exam_name = ""
        self.exam_date: Optional[datetime.date] = None
        self.preview: Any = None
        self.path_class_lists = ""
        self.path_hall_layouts = ""
        self.accepted = False

        self.nav_visible = True
        self.prev_visible = False
        self.prev_text = PREV_TEXT
        self.next_text = NEXT_TEXT

    def _exam_folder(self) -> str:
        if self.exam_date is None:
            raise RuntimeError("no exam date has been set")
        return scheme_path(self.docs_root, self.exam_name, self.exam_date)

    def next_page(self) -> None:
        """Advance one page; generator errors propagate and keep the current page."""
        page = self.page
        if page is SchemePage.EXAM_INFO:
            name = self.exam_info.simplified_name()
            date = self.exam_info.date
            self.generator.set_date(date)
            self.generator.set_name(name)
            self.exam_name, self.exam_date = name, date
            self.prev_visible = True
        elif page is SchemePage.CLASS_PICKER:
            self.generator.set_attending_classes(list(self.attending_classes))
        elif page is SchemePage.HALL_PICKER:
            self.generator.set_exam_halls(list(self.selected_halls))
            self.preview = self.generator.preview()
            self.next_text = CREATE_TEXT
        elif page is SchemePage.PREVIEW:
            self.nav_visible = False
            self.page = SchemePage.SPINNER
            if self.start_generation is not None:
                self.start_generation(self)
            return
        elif page is SchemePage.SPINNER:
            if not (self.path_class_lists and self.path_hall_layouts):
                raise RuntimeError("the scheme has not been exported yet")
            self.prev_text = OPEN_FOLDER_TEXT
            self.next_text = HOME_TEXT
            self.nav_visible = True
        else:
            self.accepted = True
            return
        self.page = SchemePage(page + 1)

    def prev_page(self) -> None:
        """Go back one page; on the results page open the exam's folder instead."""
        page = self.page
        if page in (SchemePage.EXAM_INFO, SchemePage.SPINNER):
            return
        if page is SchemePage.RESULTS:
            self.open_folder(self._exam_folder())
            return
        if page is SchemePage.CLASS_PICKER:
            self.prev_visible = False
        elif page is SchemePage.PREVIEW:
            self.next_text = NEXT_TEXT
        self.page = SchemePage(page - 1)

    def export_finished(self, path_class_lists: str, path_hall_layouts: str) -> None:
        """Record the exported files and show the results page."""
        if self.page is not SchemePage.SPINNER:
            raise RuntimeError(f"no export is running, on page {self.page.name}")
        self.path_class_lists = path_class_lists
        self.path_hall_layouts = path_hall_layouts
        self.next_page()