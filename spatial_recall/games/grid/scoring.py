"""
Blind Grid Scoring - Cell-by-cell comparison of a reconstruction.

Answers may be given as nested rows of strings or as a sparse
mapping of (row, col) -> string. Missing cells count as empty.
"""

from __future__ import annotations
from typing import Mapping, Sequence, Union

from ...engine_core.scoring import ScoreResult, cell_matches
from .state import GridState

GridAnswer = Union[Mapping[tuple[int, int], str], Sequence[Sequence[str]]]


def answer_cell(answer: GridAnswer, r: int, c: int) -> str:
    """User text for one cell, empty if unanswered."""
    if isinstance(answer, Mapping):
        return answer.get((r, c)) or ""
    try:
        return answer[r][c] or ""
    except IndexError:
        return ""


def score_grid(final: GridState, answer: GridAnswer) -> ScoreResult:
    """Count cells whose entry equals the final grid's value."""
    marks = {
        (r, c): cell_matches(value, answer_cell(answer, r, c))
        for r, c, value in final.cells()
    }
    return ScoreResult.from_marks(marks)
