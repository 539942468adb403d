"""
Invisible Die Scoring - A single face query.
"""

from __future__ import annotations

from ...engine_core.scoring import cell_matches
from .state import DieState


def check_face(final: DieState, face: str, user_value: str | None) -> bool:
    """True if the user named the value on the target face."""
    return cell_matches(final.face(face), user_value)
