"""
Voxel Carver - Remember a numbered cube while it is turned and cut.

This module contains:
- Voxel and cube state models
- The numbered starting cube
- Rotation and laser commands and their generator
- Voxel reducer and scoring
"""

from .state import CubeState, Voxel, coordinates
from .setup import create_ordered_cube
from .commands import (
    VoxelCommandKind,
    VoxelCommandGenerator,
    DEFAULT_VOXEL_WEIGHTS,
    LASER_LINES,
    rotate_y,
    laser_x,
    laser_y,
    laser_z,
)
from .reducer import VoxelReducer, apply_command, run_sequence
from .scoring import answer_key, score_cube

__all__ = [
    "CubeState",
    "Voxel",
    "coordinates",
    "create_ordered_cube",
    "VoxelCommandKind",
    "VoxelCommandGenerator",
    "DEFAULT_VOXEL_WEIGHTS",
    "LASER_LINES",
    "rotate_y",
    "laser_x",
    "laser_y",
    "laser_z",
    "VoxelReducer",
    "apply_command",
    "run_sequence",
    "answer_key",
    "score_cube",
]
