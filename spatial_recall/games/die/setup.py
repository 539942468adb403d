"""
Invisible Die Setup - The standard starting pose and the question.

Standard die: opposite sides sum to 7.
Start pose: top 1, bottom 6, front 2, back 5, left 4, right 3.
"""

from __future__ import annotations
import random

from .state import FACES, DieState


def create_canonical_die() -> DieState:
    return DieState(top=1, bottom=6, front=2, back=5, left=4, right=3)


def pick_target_face(rng: random.Random | None = None) -> str:
    """Face the player is asked about at the end of a session."""
    rng = rng or random.Random()
    return rng.choice(FACES)
