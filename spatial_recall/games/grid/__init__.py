"""
Blind Grid - Memorize a 3x3 grid, then rebuild it after hidden commands.

This module contains:
- Grid state model
- Ordered and shuffled starting grids
- Grid commands and their generator
- Grid reducer and scoring
"""

from .state import GridState
from .setup import create_ordered_grid, create_random_grid
from .commands import (
    GridCommandKind,
    GridCommandGenerator,
    DEFAULT_GRID_WEIGHTS,
    rotate_cw,
    swap,
    mirror_horizontal,
    set_row,
)
from .reducer import GridReducer, apply_command, run_sequence
from .scoring import score_grid

__all__ = [
    "GridState",
    "create_ordered_grid",
    "create_random_grid",
    "GridCommandKind",
    "GridCommandGenerator",
    "DEFAULT_GRID_WEIGHTS",
    "rotate_cw",
    "swap",
    "mirror_horizontal",
    "set_row",
    "GridReducer",
    "apply_command",
    "run_sequence",
    "score_grid",
]
