"""Choosing attending classes and exam halls, remembering earlier choices."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Sequence, Union

CLASS_SELECTION_KEY = "selected_classnames"
HALL_SELECTION_KEY = "selected_hallnames"


class SelectionStore:
    """Remembers lists of names under keys, in a JSON file or in memory."""

    def __init__(self, path: Union[str, os.PathLike, None] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._memory: dict[str, list[str]] = {}

    def _load(self) -> dict:
        if self.path is None:
            return dict(self._memory)
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def read(self, key: str) -> list[str]:
        """Return the names stored under a key, or an empty list."""
        values = self._load().get(key, [])
        if not isinstance(values, list):
            return []
        return [str(value) for value in values]

    def write(self, key: str, values: Iterable[str]) -> None:
        """Store names under a key, replacing what was there."""
        data = self._load()
        data[key] = list(values)
        if self.path is None:
            self._memory = data
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


class ListPicker:
    """Two lists, included and excluded, with names moved between them."""

    def __init__(
        self,
        available: Sequence[str],
        store: SelectionStore,
        key: str,
        sort_key: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.store = store
        self.key = key
        self.sort_key = sort_key
        self.excluded: list[str] = list(available)
        self.included: list[str] = []
        for name in store.read(key):
            if name in self.excluded:
                self.excluded = [item for item in self.excluded if item != name]
                self.included.append(name)

    def __enter__(self) -> "ListPicker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    def _move(self, items: Iterable[str], source: list[str], target: list[str]) -> list[str]:
        items = list(items)
        remaining = list(source)
        for item in items:
            try:
                remaining.remove(item)
            except ValueError:
                raise ValueError(f"{item!r} is not in the list it is moved from") from None
        source[:] = remaining
        return sorted([*target, *items], key=self.sort_key)

    def include(self, items: Iterable[str]) -> None:
        """Move names from the excluded list to the included list."""
        self.included = self._move(items, self.excluded, self.included)

    def exclude(self, items: Iterable[str]) -> None:
        """Move names from the included list back to the excluded list."""
        self.excluded = self._move(items, self.included, self.excluded)

    def save(self) -> None:
        """Remember the included names, without duplicates, for next time."""
        self.store.write(self.key, dict.fromkeys(self.included))