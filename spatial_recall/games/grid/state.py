"""
Blind Grid State - A 3x3 matrix of numbers.

The state is immutable: every change returns a new GridState,
so history snapshots can never alias each other.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

from ...engine_core.command import SIZE

Rows = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class GridState:
    """A square grid of integers, always SIZE x SIZE."""
    rows: Rows

    def __post_init__(self) -> None:
        if len(self.rows) != SIZE or any(len(row) != SIZE for row in self.rows):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> GridState:
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def size(self) -> int:
        return len(self.rows)

    def cell(self, r: int, c: int) -> int:
        return self.rows[r][c]

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, value) in row-major order."""
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                yield r, c, value

    def with_cell(self, r: int, c: int, value: int) -> GridState:
        """Return new grid with one cell replaced."""
        rows = self.to_rows()
        rows[r][c] = value
        return GridState.from_rows(rows)

    def to_rows(self) -> list[list[int]]:
        """Mutable copy as nested lists."""
        return [list(row) for row in self.rows]
