"""
Invisible Die State - Which number shows on each face.

Commands only move values between face labels, so a die that
starts with opposite faces summing to 7 keeps that property.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Mapping

FACES = ("top", "bottom", "front", "back", "left", "right")

OPPOSITE_FACES = (
    ("top", "bottom"),
    ("front", "back"),
    ("left", "right"),
)


@dataclass(frozen=True)
class DieState:
    """Face label -> value."""
    top: int
    bottom: int
    front: int
    back: int
    left: int
    right: int

    @classmethod
    def from_faces(cls, faces: Mapping[str, int]) -> DieState:
        unknown = set(faces) - set(FACES)
        if unknown:
            raise ValueError(f"Unknown die faces: {sorted(unknown)}")
        return cls(**{face: faces[face] for face in FACES})

    def face(self, name: str) -> int:
        if name not in FACES:
            raise ValueError(f"Unknown die face: {name}")
        return getattr(self, name)

    def faces(self) -> dict[str, int]:
        return asdict(self)

    def opposite_sums(self) -> dict[tuple[str, str], int]:
        return {(a, b): self.face(a) + self.face(b) for a, b in OPPOSITE_FACES}
