"""
Invisible Die Reducer - Applies rolls and spins.

Each command is a cycle of four faces. The tables below read
"new face <- old face":
- ROLL_FORWARD: top goes to front, front to bottom, bottom to back, back to top
- ROLL_RIGHT: top goes to right, right to bottom, bottom to left, left to top
- ROTATE_CW (seen from above): front goes to right, right to back, back to left, left to front
The backward, left and counter-clockwise kinds are the inverse cycles.
"""

from __future__ import annotations
from typing import Iterable

from ...engine_core.command import Command, CommandKind
from ...engine_core.reducer import Handler, Reducer, SequenceResult
from .commands import DieCommandKind
from .state import DieState

PERMUTATIONS: dict[DieCommandKind, dict[str, str]] = {
    DieCommandKind.ROLL_FORWARD: {"front": "top", "bottom": "front", "back": "bottom", "top": "back"},
    DieCommandKind.ROLL_BACKWARD: {"back": "top", "bottom": "back", "front": "bottom", "top": "front"},
    DieCommandKind.ROLL_RIGHT: {"right": "top", "bottom": "right", "left": "bottom", "top": "left"},
    DieCommandKind.ROLL_LEFT: {"left": "top", "bottom": "left", "right": "bottom", "top": "right"},
    DieCommandKind.ROTATE_CW: {"right": "front", "back": "right", "left": "back", "front": "left"},
    DieCommandKind.ROTATE_CCW: {"left": "front", "back": "left", "right": "back", "front": "right"},
}


class DieReducer(Reducer):
    """Reducer for the Invisible Die."""
    domain = "die"
    start_description = "Initial Position"

    def _handlers(self) -> dict[CommandKind, Handler]:
        return {kind: _permute for kind in PERMUTATIONS}


def _permute(state: DieState, command: Command) -> DieState:
    current = state.faces()
    moved = {new: current[old] for new, old in PERMUTATIONS[command.kind].items()}
    return DieState.from_faces({**current, **moved})


def apply_command(state: DieState, command: Command) -> DieState:
    """Convenience function to apply one die command."""
    return DieReducer().apply(state, command)


def run_sequence(initial: DieState, commands: Iterable[Command]) -> SequenceResult:
    """Convenience function to replay die commands with history."""
    return DieReducer().run(initial, commands)
