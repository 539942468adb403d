"""
Voxel Carver Reducer - Applies rotation and lasers.

Semantics on an N-wide cube:
- ROTATE_Y: new_x = N-1-old_z, new_z = old_x, y unchanged, for
  every block including destroyed ones
- LASER_*: every block on the addressed line is destroyed
"""

from __future__ import annotations
from typing import Iterable

from ...engine_core.command import SIZE, Command, CommandKind
from ...engine_core.reducer import Handler, Reducer, SequenceResult
from .commands import LASER_LINES, VoxelCommandKind
from .state import CubeState


class VoxelReducer(Reducer):
    """Reducer for Voxel Carver."""
    domain = "voxel"
    start_description = "Start Configuration"

    def _handlers(self) -> dict[CommandKind, Handler]:
        handlers: dict[CommandKind, Handler] = {VoxelCommandKind.ROTATE_Y: _rotate_y}
        handlers.update({kind: _laser for kind in LASER_LINES})
        return handlers


def _rotate_y(state: CubeState, command: Command) -> CubeState:
    return CubeState(voxels=tuple(
        v.moved_to(x=SIZE - 1 - v.z, y=v.y, z=v.x) for v in state
    ))


def _laser(state: CubeState, command: Command) -> CubeState:
    axis1, axis2 = LASER_LINES[command.kind]
    target = (command.params.target1, command.params.target2)
    return CubeState(voxels=tuple(
        v.destroyed() if (getattr(v, axis1), getattr(v, axis2)) == target else v
        for v in state
    ))


def apply_command(state: CubeState, command: Command) -> CubeState:
    """Convenience function to apply one voxel command."""
    return VoxelReducer().apply(state, command)


def run_sequence(initial: CubeState, commands: Iterable[Command]) -> SequenceResult:
    """Convenience function to replay voxel commands with history."""
    return VoxelReducer().run(initial, commands)
