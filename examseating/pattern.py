"""Exam variant patterns that keep neighbouring students on different papers."""

from __future__ import annotations

import random as _random
from enum import IntEnum


class Variant(IntEnum):
    """An exam paper variant."""

    A = 0
    B = 1
    C = 2
    D = 3


_A, _B, _C, _D = Variant.A, Variant.B, Variant.C, Variant.D

_PATTERNS: tuple[tuple[tuple[Variant, ...], ...], ...] = (
    # 1-variant pattern
    tuple((_A, _A, _A, _A, _A, _A) for _ in range(6)),
    # 2-variant pattern
    tuple((_A, _B, _A, _B, _A, _B) for _ in range(6)),
    # 3-variant pattern
    (
        (_A, _B, _A, _B, _A, _B),
        (_A, _C, _A, _C, _A, _C),
        (_B, _C, _B, _C, _B, _C),
        (_B, _A, _B, _A, _B, _A),
        (_C, _A, _C, _A, _C, _A),
        (_C, _B, _C, _B, _C, _B),
    ),
    # 4-variant pattern
    (
        (_A, _B, _C, _D, _A, _B),
        (_C, _D, _A, _B, _C, _D),
        (_A, _B, _C, _D, _A, _B),
        (_C, _D, _A, _B, _C, _D),
        (_A, _B, _C, _D, _A, _B),
        (_C, _D, _A, _B, _C, _D),
    ),
)

_ROWS = 6
_COLS = 6


class Pattern:
    """A variant layout for a number of grades, shifted by a row offset."""

    def __init__(self, grade_count: int, seed: int) -> None:
        if not 1 <= grade_count <= len(_PATTERNS):
            raise ValueError(f"grade count must be between 1 and {len(_PATTERNS)}, got {grade_count}")
        self.grade_index = grade_count - 1
        self.start_offset = seed

    @classmethod
    def random(cls, grade_count: int) -> "Pattern":
        """Create a pattern with a random starting row offset."""
        seed = _random.SystemRandom().randrange(0, 1 << 30)
        return cls(grade_count, seed)

    def variant_at(self, row: int, col: int) -> Variant:
        """Return the variant for the desk at the given row and column."""
        if not 0 <= col < _COLS:
            raise IndexError(f"column must be between 0 and {_COLS - 1}, got {col}")
        actual_row = (row + self.start_offset) % _ROWS
        return _PATTERNS[self.grade_index][actual_row][col]

    def __repr__(self) -> str:
        return f"Pattern(grade_count={self.grade_index + 1}, seed={self.start_offset})"