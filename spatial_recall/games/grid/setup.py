"""
Blind Grid Setup - Creates the starting grid.

Two variants:
- Ordered: 1..9 in reading order
- Random: an unbiased shuffle of 1..9 (every permutation equally likely)
"""

from __future__ import annotations
import random

from ...engine_core.command import SIZE
from .state import GridState


def create_ordered_grid() -> GridState:
    """Grid filled 1..9 row-major."""
    return GridState.from_rows(
        [[r * SIZE + c + 1 for c in range(SIZE)] for r in range(SIZE)]
    )


def create_random_grid(rng: random.Random | None = None) -> GridState:
    """
    Grid holding a uniform random permutation of 1..9.

    Args:
        rng: Random source (a fresh one if not provided)
    """
    rng = rng or random.Random()
    values = list(range(1, SIZE * SIZE + 1))
    rng.shuffle(values)
    return GridState.from_rows(
        [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
    )
