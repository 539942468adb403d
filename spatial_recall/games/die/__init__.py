"""
Invisible Die - Track a standard die through rolls and spins.

This module contains:
- Die state model and the standard start pose
- Roll and spin commands and their generator
- Die reducer and the single-face check
"""

from .state import DieState, FACES, OPPOSITE_FACES
from .setup import create_canonical_die, pick_target_face
from .commands import (
    DieCommandKind,
    DieCommandGenerator,
    DEFAULT_DIE_WEIGHTS,
    die_command,
    roll_forward,
    roll_backward,
    roll_right,
    roll_left,
    rotate_cw,
    rotate_ccw,
)
from .reducer import DieReducer, apply_command, run_sequence
from .scoring import check_face

__all__ = [
    "DieState",
    "FACES",
    "OPPOSITE_FACES",
    "create_canonical_die",
    "pick_target_face",
    "DieCommandKind",
    "DieCommandGenerator",
    "DEFAULT_DIE_WEIGHTS",
    "die_command",
    "roll_forward",
    "roll_backward",
    "roll_right",
    "roll_left",
    "rotate_cw",
    "rotate_ccw",
    "DieReducer",
    "apply_command",
    "run_sequence",
    "check_face",
]
