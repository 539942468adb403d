"""
Voxel Carver Scoring - Slice-by-slice reconstruction of the cube.

Answers map "z-y-x" keys to the text typed in that cell. A
destroyed (or empty) position is correct only when left blank.
"""

from __future__ import annotations
from typing import Mapping

from ...engine_core.scoring import ScoreResult, cell_matches
from .state import CubeState, coordinates


def answer_key(x: int, y: int, z: int) -> str:
    return f"{z}-{y}-{x}"


def score_cube(final: CubeState, answer: Mapping[str, str]) -> ScoreResult:
    """Compare all 27 positions against the final cube."""
    marks = {
        answer_key(x, y, z): cell_matches(
            final.value_at(x, y, z), answer.get(answer_key(x, y, z))
        )
        for x, y, z in coordinates()
    }
    return ScoreResult.from_marks(marks)
