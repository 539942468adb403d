"""
Blind Grid Reducer - Applies grid commands.

Semantics on an N x N grid:
- ROTATE_CW: cell (r, c) moves to (c, N-1-r)
- MIRROR_HORIZONTAL: each row is reversed
- SWAP: the two addressed cells exchange values
- SET_ROW: every cell of the row takes the constant
"""

from __future__ import annotations
from typing import Iterable

from ...engine_core.command import Command, CommandKind
from ...engine_core.reducer import Handler, Reducer, SequenceResult
from .commands import GridCommandKind
from .state import GridState


class GridReducer(Reducer):
    """Reducer for Blind Grid."""
    domain = "grid"
    start_description = "Start Configuration"

    def _handlers(self) -> dict[CommandKind, Handler]:
        return {
            GridCommandKind.ROTATE_CW: _rotate_cw,
            GridCommandKind.SWAP: _swap,
            GridCommandKind.MIRROR_HORIZONTAL: _mirror_horizontal,
            GridCommandKind.SET_ROW: _set_row,
        }


def _rotate_cw(state: GridState, command: Command) -> GridState:
    n = state.size
    rotated = [[0] * n for _ in range(n)]
    for r, c, value in state.cells():
        rotated[c][n - 1 - r] = value
    return GridState.from_rows(rotated)


def _mirror_horizontal(state: GridState, command: Command) -> GridState:
    return GridState.from_rows([list(reversed(row)) for row in state.rows])


def _swap(state: GridState, command: Command) -> GridState:
    p = command.params
    first, second = state.cell(p.r1, p.c1), state.cell(p.r2, p.c2)
    return state.with_cell(p.r1, p.c1, second).with_cell(p.r2, p.c2, first)


def _set_row(state: GridState, command: Command) -> GridState:
    p = command.params
    rows = state.to_rows()
    rows[p.row] = [p.value] * state.size
    return GridState.from_rows(rows)


def apply_command(state: GridState, command: Command) -> GridState:
    """Convenience function to apply one grid command."""
    return GridReducer().apply(state, command)


def run_sequence(initial: GridState, commands: Iterable[Command]) -> SequenceResult:
    """Convenience function to replay grid commands with history."""
    return GridReducer().run(initial, commands)
