"""
Blind Grid Commands - Kinds, factories, and the random generator.

Kinds:
- ROTATE_CW: rotate the whole grid 90 degrees clockwise
- SWAP: exchange two cells
- MIRROR_HORIZONTAL: reverse every row
- SET_ROW: overwrite one row with a constant
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping

from ...engine_core.command import Command, CommandKind, CommandParams, one_based
from ...engine_core.command_generator import Builder, CommandGenerator


class GridCommandKind(CommandKind):
    """Grid command kinds."""
    ROTATE_CW = "rotate_cw"
    SWAP = "swap"
    MIRROR_HORIZONTAL = "mirror_horizontal"
    SET_ROW = "set_row"

    @property
    def domain(self) -> str:
        return "grid"

    @property
    def required_params(self) -> tuple[str, ...]:
        return _REQUIRED_PARAMS.get(self, ())


_REQUIRED_PARAMS = {
    GridCommandKind.SWAP: ("r1", "c1", "r2", "c2"),
    GridCommandKind.SET_ROW: ("row", "value"),
}

DEFAULT_GRID_WEIGHTS: dict[GridCommandKind, float] = {
    GridCommandKind.ROTATE_CW: 0.3,
    GridCommandKind.SWAP: 0.3,
    GridCommandKind.MIRROR_HORIZONTAL: 0.2,
    GridCommandKind.SET_ROW: 0.2,
}


def rotate_cw(command_id: str = "") -> Command:
    return Command(
        kind=GridCommandKind.ROTATE_CW,
        description="Rotate 90° Clockwise",
        command_id=command_id,
    )


def swap(r1: int, c1: int, r2: int, c2: int, command_id: str = "") -> Command:
    return Command(
        kind=GridCommandKind.SWAP,
        description=f"Swap ({r1},{c1}) with ({r2},{c2})",
        params=CommandParams(r1=r1, c1=c1, r2=r2, c2=c2),
        command_id=command_id,
    )


def mirror_horizontal(command_id: str = "") -> Command:
    return Command(
        kind=GridCommandKind.MIRROR_HORIZONTAL,
        description="Mirror Horizontally (flip left-right)",
        command_id=command_id,
    )


def set_row(row: int, value: int = 0, command_id: str = "") -> Command:
    """Rows are 0-indexed in params and 1-indexed in the description."""
    fill = "Zeros" if value == 0 else f"{value}s"
    return Command(
        kind=GridCommandKind.SET_ROW,
        description=f"Set Row {one_based(row)} to all {fill}",
        params=CommandParams(row=row, value=value),
        command_id=command_id,
    )


@dataclass
class GridCommandGenerator(CommandGenerator):
    """
    Generates grid commands.

    Swap always picks two distinct cells; set-row picks a
    uniform row and fills it with set_row_value.
    """
    weights: Mapping[CommandKind, float] = field(
        default_factory=lambda: dict(DEFAULT_GRID_WEIGHTS)
    )
    set_row_value: int = 0

    def _builders(self) -> dict[CommandKind, Builder]:
        return {
            GridCommandKind.ROTATE_CW: lambda: rotate_cw(self._new_id()),
            GridCommandKind.SWAP: self._build_swap,
            GridCommandKind.MIRROR_HORIZONTAL: lambda: mirror_horizontal(self._new_id()),
            GridCommandKind.SET_ROW: self._build_set_row,
        }

    def _build_swap(self) -> Command:
        r1, c1 = self._index(), self._index()
        r2, c2 = self._index(), self._index()
        while (r1, c1) == (r2, c2):
            r2, c2 = self._index(), self._index()
        return swap(r1, c1, r2, c2, command_id=self._new_id())

    def _build_set_row(self) -> Command:
        return set_row(self._index(), self.set_row_value, command_id=self._new_id())
