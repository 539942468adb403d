"""
Scoring - Compares user answers against the true configuration.

Rules:
- A cell is correct only if the user's text, read as an integer,
  equals the true value exactly
- An empty true value (a destroyed block) is correct only if the
  user left the cell empty
- Unanswered cells count as empty text, never as an error
- No partial credit, no tolerance
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable


@dataclass(frozen=True)
class ScoreResult:
    """
    Result of scoring a full reconstruction.

    marks holds one entry per cell (True when correct)
    so a review screen can highlight each cell.
    """
    correct_count: int
    total_cells: int
    marks: dict[Hashable, bool] = field(default_factory=dict)

    @property
    def is_perfect(self) -> bool:
        return self.correct_count == self.total_cells

    @property
    def accuracy(self) -> float:
        if self.total_cells == 0:
            return 0.0
        return self.correct_count / self.total_cells

    @classmethod
    def from_marks(cls, marks: dict[Hashable, bool]) -> ScoreResult:
        return cls(
            correct_count=sum(1 for ok in marks.values() if ok),
            total_cells=len(marks),
            marks=dict(marks),
        )


def parse_cell(text: str | None) -> int | None:
    """Integer value of a cell entry, or None if empty or not a number."""
    if not text:
        return None
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def cell_matches(expected: int | None, given: str | None) -> bool:
    """
    Check one cell.

    expected None means the cell should be left empty.
    """
    given = given or ""
    if expected is None:
        return given == ""
    value = parse_cell(given)
    return value is not None and value == expected
