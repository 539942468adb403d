"""
Voxel Carver Commands - Rotation and lasers.

Kinds:
- ROTATE_Y: turn the cube 90 degrees clockwise about the vertical axis
- LASER_Z: fire front-to-back through (x, y)
- LASER_X: fire side-to-side through (y, z)
- LASER_Y: fire top-down through (x, z)

Lasers store their two fixed coordinates as target1/target2,
in the order listed above.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping

from ...engine_core.command import Command, CommandKind, CommandParams, one_based
from ...engine_core.command_generator import Builder, CommandGenerator


class VoxelCommandKind(CommandKind):
    """Voxel command kinds."""
    ROTATE_Y = "rotate_y"
    LASER_X = "laser_x"
    LASER_Y = "laser_y"
    LASER_Z = "laser_z"

    @property
    def domain(self) -> str:
        return "voxel"

    @property
    def required_params(self) -> tuple[str, ...]:
        if self is VoxelCommandKind.ROTATE_Y:
            return ()
        return ("target1", "target2")


# Which voxel coordinates target1/target2 pin down for each laser
LASER_LINES: dict[VoxelCommandKind, tuple[str, str]] = {
    VoxelCommandKind.LASER_Z: ("x", "y"),
    VoxelCommandKind.LASER_X: ("y", "z"),
    VoxelCommandKind.LASER_Y: ("x", "z"),
}

DEFAULT_VOXEL_WEIGHTS: dict[VoxelCommandKind, float] = {
    VoxelCommandKind.ROTATE_Y: 0.35,
    VoxelCommandKind.LASER_X: 0.65 / 3,
    VoxelCommandKind.LASER_Y: 0.65 / 3,
    VoxelCommandKind.LASER_Z: 0.65 / 3,
}


def rotate_y(command_id: str = "") -> Command:
    return Command(
        kind=VoxelCommandKind.ROTATE_Y,
        description="Rotate Cube 90° Clockwise",
        command_id=command_id,
    )


def laser_z(x: int, y: int, command_id: str = "") -> Command:
    return Command(
        kind=VoxelCommandKind.LASER_Z,
        description=f"Fire Laser Front-to-Back at Col {one_based(x)}, Row {one_based(y)}",
        params=CommandParams(target1=x, target2=y),
        command_id=command_id,
    )


def laser_x(y: int, z: int, command_id: str = "") -> Command:
    return Command(
        kind=VoxelCommandKind.LASER_X,
        description=f"Fire Laser Side-to-Side at Row {one_based(y)}, Depth {one_based(z)}",
        params=CommandParams(target1=y, target2=z),
        command_id=command_id,
    )


def laser_y(x: int, z: int, command_id: str = "") -> Command:
    return Command(
        kind=VoxelCommandKind.LASER_Y,
        description=f"Fire Laser Top-Down at Col {one_based(x)}, Depth {one_based(z)}",
        params=CommandParams(target1=x, target2=z),
        command_id=command_id,
    )


@dataclass
class VoxelCommandGenerator(CommandGenerator):
    """Generates voxel commands; lasers pick their line uniformly."""
    weights: Mapping[CommandKind, float] = field(
        default_factory=lambda: dict(DEFAULT_VOXEL_WEIGHTS)
    )

    def _builders(self) -> dict[CommandKind, Builder]:
        return {
            VoxelCommandKind.ROTATE_Y: lambda: rotate_y(self._new_id()),
            VoxelCommandKind.LASER_X: lambda: laser_x(self._index(), self._index(), self._new_id()),
            VoxelCommandKind.LASER_Y: lambda: laser_y(self._index(), self._index(), self._new_id()),
            VoxelCommandKind.LASER_Z: lambda: laser_z(self._index(), self._index(), self._new_id()),
        }
