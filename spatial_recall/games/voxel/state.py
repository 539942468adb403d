"""
Voxel Carver State - A 3x3x3 cube of numbered blocks.

Axes:
- x: 0 (left) -> 2 (right)
- y: 0 (top) -> 2 (bottom)
- z: 0 (front) -> 2 (back)

A block keeps its identity forever. Rotation moves blocks,
lasers mark them as destroyed; destroyed blocks still carry
coordinates and keep rotating with the cube.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator

from ...engine_core.command import SIZE

Coord = tuple[int, int, int]


@dataclass(frozen=True)
class Voxel:
    """One block: its number, where it sits, and whether it still exists."""
    identity: int
    x: int
    y: int
    z: int
    present: bool = True

    @property
    def coord(self) -> Coord:
        return (self.x, self.y, self.z)

    def moved_to(self, x: int, y: int, z: int) -> Voxel:
        return replace(self, x=x, y=y, z=z)

    def destroyed(self) -> Voxel:
        return replace(self, present=False)


@dataclass(frozen=True)
class CubeState:
    """All SIZE**3 blocks, in creation order."""
    voxels: tuple[Voxel, ...]

    def __post_init__(self) -> None:
        if len(self.voxels) != SIZE ** 3:
            raise ValueError(f"Cube must hold {SIZE ** 3} voxels")
        if len({v.identity for v in self.voxels}) != len(self.voxels):
            raise ValueError("Voxel identities must be unique")
        present = [v.coord for v in self.voxels if v.present]
        if len(set(present)) != len(present):
            raise ValueError("Two present voxels share a coordinate")

    def __iter__(self) -> Iterator[Voxel]:
        return iter(self.voxels)

    @property
    def present_count(self) -> int:
        return sum(1 for v in self.voxels if v.present)

    def voxel_at(self, x: int, y: int, z: int) -> Voxel | None:
        """The present block at a coordinate, if any."""
        for v in self.voxels:
            if v.present and v.coord == (x, y, z):
                return v
        return None

    def value_at(self, x: int, y: int, z: int) -> int | None:
        voxel = self.voxel_at(x, y, z)
        return voxel.identity if voxel else None

    def get(self, identity: int) -> Voxel:
        for v in self.voxels:
            if v.identity == identity:
                return v
        raise KeyError(identity)

    def slice_rows(self, z: int) -> list[list[int | None]]:
        """One depth slice as rows (y) of columns (x); None where empty."""
        return [[self.value_at(x, y, z) for x in range(SIZE)] for y in range(SIZE)]


def coordinates() -> Iterator[Coord]:
    """Every (x, y, z) in scan order: z, then y, then x."""
    for z in range(SIZE):
        for y in range(SIZE):
            for x in range(SIZE):
                yield x, y, z
