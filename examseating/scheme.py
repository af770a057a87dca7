"""Generated exam schemes and where their files are stored."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from examseating.hall import Hall
from examseating.models import ExamStudent

SCHEMES_DIR_NAME = "Sınav Düzenleri"
CLASS_LIST_FILE = "Sınıf Karma Listeleri.xlsx"
HALL_LAYOUT_FILE = "Oturma Planları.xlsx"


def schemes_root(docs_root: str) -> str:
    """Return the directory that holds every generated scheme."""
    return f"{docs_root}/{SCHEMES_DIR_NAME}/"


def scheme_path(docs_root: str, exam_name: str, exam_date: datetime.date) -> str:
    """Return the directory of the scheme for one exam."""
    return f"{schemes_root(docs_root)}{exam_date.strftime('%d.%m.%Y')}/{exam_name}"


@dataclass
class Scheme:
    """An exam seating scheme: class lists and filled hall layouts."""

    name: str
    date: datetime.date
    docs_root: str
    class_lists: list[tuple[str, list[ExamStudent]]] = field(default_factory=list)
    hall_layouts: list[Hall] = field(default_factory=list)

    def path(self) -> str:
        """Directory in which this scheme's files are stored."""
        return scheme_path(self.docs_root, self.name, self.date)

    def class_list_path(self) -> str:
        """Path of the spreadsheet with the mixed class lists."""
        return f"{self.path()}/{CLASS_LIST_FILE}"

    def hall_layout_path(self) -> str:
        """Path of the spreadsheet with the hall seating plans."""
        return f"{self.path()}/{HALL_LAYOUT_FILE}"