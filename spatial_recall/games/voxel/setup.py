"""
Voxel Carver Setup - The numbered starting cube.

Numbers follow reading order: front slice to back slice,
and within a slice top-left to bottom-right.
"""

from __future__ import annotations

from .state import CubeState, Voxel, coordinates


def create_ordered_cube() -> CubeState:
    """27 present blocks numbered 1..27 in z, y, x scan order."""
    return CubeState(voxels=tuple(
        Voxel(identity=counter, x=x, y=y, z=z)
        for counter, (x, y, z) in enumerate(coordinates(), start=1)
    ))
