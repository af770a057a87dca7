"""Exam halls and their desk layouts."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Optional

from examseating.models import DESKS_PER_ROW, Desk
from examseating.pattern import Pattern, Variant

DeskRow = list[Desk]


def _new_row() -> DeskRow:
    return [Desk() for _ in range(DESKS_PER_ROW)]


@dataclass
class Layout:
    """Rows of six desks, some of which may not exist."""

    desk_rows: list[DeskRow] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> "Layout":
        """Fill whole rows of six and mark the surplus desks of the last row missing."""
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        row_count = math.ceil(capacity / DESKS_PER_ROW)
        layout = cls([_new_row() for _ in range(row_count)])
        remainder = capacity % DESKS_PER_ROW
        if remainder:
            for desk in layout.desk_rows[-1][remainder:]:
                desk.exists = False
        return layout

    @classmethod
    def from_json_str(cls, json_str: str) -> "Layout":
        """Read a layout from its JSON form; unreadable input gives an empty layout."""
        try:
            document = json.loads(json_str)
        except (json.JSONDecodeError, TypeError):
            return cls()
        if not isinstance(document, dict):
            return cls()
        rows = document.get("desks")
        if not isinstance(rows, list):
            return cls()

        layout = cls()
        for json_row in rows:
            cells = json_row if isinstance(json_row, list) else []
            row = _new_row()
            for col, desk in enumerate(row):
                value = cells[col] if col < len(cells) else False
                desk.exists = value is True
            layout.desk_rows.append(row)
        return layout

    def to_json_str(self) -> str:
        """Write the layout as compact JSON of desk existence flags."""
        desks = [[desk.exists for desk in row] for row in self.desk_rows]
        return json.dumps({"desks": desks}, separators=(",", ":"))

    def clear(self) -> None:
        """Remove every student from the layout."""
        for row in self.desk_rows:
            for desk in row:
                desk.is_empty = True
                desk.student = None

    def desks(self):
        """Yield (row, col, desk) for every desk position."""
        for row_idx, row in enumerate(self.desk_rows):
            for col_idx, desk in enumerate(row):
                yield row_idx, col_idx, desk


@dataclass
class Hall:
    """A named exam hall with a desk layout and an optional variant pattern."""

    name: str = ""
    capacity: int = 0
    layout: Optional[Layout] = None
    pattern: Optional[Pattern] = None

    def __post_init__(self) -> None:
        if self.layout is None:
            self.layout = Layout.with_capacity(self.capacity)

    def count_variant(self, variant: Variant) -> int:
        """Count the existing desks that get the given variant."""
        if self.pattern is None:
            raise ValueError(f"hall {self.name!r} has no pattern")
        return sum(
            1
            for row, col, desk in self.layout.desks()
            if desk.exists and self.pattern.variant_at(row, col) == variant
        )

    def count_students(self, grade: int, section: str) -> int:
        """Count the seated students of one class."""
        return sum(
            1
            for _, _, desk in self.layout.desks()
            if desk.exists
            and not desk.is_empty
            and desk.student is not None
            and desk.student.grade == grade
            and desk.student.section == section
        )