"""
Invisible Die Commands - Rolls and spins.

Rolls pivot the die 90 degrees about a horizontal axis, moving
four faces while the other two stay put. Spins turn it about the
vertical axis through top and bottom.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping

from ...engine_core.command import Command, CommandKind
from ...engine_core.command_generator import Builder, CommandGenerator


class DieCommandKind(CommandKind):
    """Die command kinds. None take parameters."""
    ROLL_FORWARD = "roll_forward"
    ROLL_BACKWARD = "roll_backward"
    ROLL_RIGHT = "roll_right"
    ROLL_LEFT = "roll_left"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"

    @property
    def domain(self) -> str:
        return "die"


DESCRIPTIONS: dict[DieCommandKind, str] = {
    DieCommandKind.ROLL_FORWARD: "Roll Forward",
    DieCommandKind.ROLL_BACKWARD: "Roll Backward",
    DieCommandKind.ROLL_RIGHT: "Roll Right",
    DieCommandKind.ROLL_LEFT: "Roll Left",
    DieCommandKind.ROTATE_CW: "Spin 90° Clockwise",
    DieCommandKind.ROTATE_CCW: "Spin 90° Counter-Clockwise",
}

DEFAULT_DIE_WEIGHTS: dict[DieCommandKind, float] = {kind: 1.0 for kind in DieCommandKind}


def die_command(kind: DieCommandKind, command_id: str = "") -> Command:
    return Command(kind=kind, description=DESCRIPTIONS[kind], command_id=command_id)


def roll_forward(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROLL_FORWARD, command_id)


def roll_backward(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROLL_BACKWARD, command_id)


def roll_right(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROLL_RIGHT, command_id)


def roll_left(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROLL_LEFT, command_id)


def rotate_cw(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROTATE_CW, command_id)


def rotate_ccw(command_id: str = "") -> Command:
    return die_command(DieCommandKind.ROTATE_CCW, command_id)


@dataclass
class DieCommandGenerator(CommandGenerator):
    """Generates die commands, uniform over the six kinds by default."""
    weights: Mapping[CommandKind, float] = field(
        default_factory=lambda: dict(DEFAULT_DIE_WEIGHTS)
    )

    def _builders(self) -> dict[CommandKind, Builder]:
        return {
            kind: (lambda kind=kind: die_command(kind, self._new_id()))
            for kind in DieCommandKind
        }
