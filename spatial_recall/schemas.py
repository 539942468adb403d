"""
Pydantic Schemas - User answers in, session review out.

Answer models are the input boundary: a cell holds at most two
digits or nothing. Anything else is rejected here with a
ValidationError and never reaches the scorer.

Export models describe a finished session (configurations,
commands, history, score) for review screens and --json output.
"""

import re
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, field_validator

from .engine_core.command import SIZE, Command
from .engine_core.reducer import HistoryStep
from .engine_core.scoring import ScoreResult
from .games.die.state import DieState
from .games.grid.state import GridState
from .games.voxel.state import CubeState

CELL_PATTERN = r"^[0-9]{0,2}$"
VOXEL_KEY_PATTERN = r"^[0-2]-[0-2]-[0-2]$"

CellText = Annotated[str, Field(pattern=CELL_PATTERN)]


class GameName(str, Enum):
    """Built-in games."""
    GRID = "grid"
    DIE = "die"
    VOXEL = "voxel"


# =============================================================================
# Answer Models
# =============================================================================

class GridAnswer(BaseModel):
    """Reconstruction of the 3x3 grid; short or missing rows count as empty."""
    rows: list[list[CellText]] = Field(default_factory=list)

    @field_validator("rows")
    @classmethod
    def check_shape(cls, rows: list[list[str]]) -> list[list[str]]:
        if len(rows) > SIZE or any(len(row) > SIZE for row in rows):
            raise ValueError(f"grid answer is at most {SIZE}x{SIZE}")
        return rows

    def to_rows(self) -> list[list[str]]:
        """Full SIZE x SIZE rows, padded with empty cells."""
        return [
            [
                self.rows[r][c] if r < len(self.rows) and c < len(self.rows[r]) else ""
                for c in range(SIZE)
            ]
            for r in range(SIZE)
        ]


class CubeAnswer(BaseModel):
    """Reconstruction of the cube, keyed "z-y-x"; missing keys count as empty."""
    cells: dict[str, CellText] = Field(default_factory=dict)

    @field_validator("cells")
    @classmethod
    def check_keys(cls, cells: dict[str, str]) -> dict[str, str]:
        bad = sorted(key for key in cells if not re.match(VOXEL_KEY_PATTERN, key))
        if bad:
            raise ValueError(f"voxel keys must look like 'z-y-x': {bad}")
        return cells


class DieAnswer(BaseModel):
    """The value the player believes is on the target face."""
    value: CellText = ""


# =============================================================================
# Export Models
# =============================================================================

class CommandInfo(BaseModel):
    """A command as shown in the audit trail."""
    command_id: str
    kind: str
    description: str
    params: dict[str, int] = Field(default_factory=dict)


class HistoryStepInfo(BaseModel):
    """One configuration snapshot in the audit trail."""
    step_index: int
    command_description: str
    state: Any


class ScoreInfo(BaseModel):
    """Score of a submitted answer."""
    correct_count: int
    total_cells: int
    is_perfect: bool
    marks: dict[str, bool] = Field(default_factory=dict)


class SessionExport(BaseModel):
    """Everything a review screen needs about one session."""
    session_id: str
    game: GameName
    title: str
    phase: str
    seed: Optional[int] = None
    initial_state: Any
    commands: list[CommandInfo] = Field(default_factory=list)
    history: list[HistoryStepInfo] = Field(default_factory=list)
    final_state: Any
    target_face: Optional[str] = Field(None, description="Die only: the face being asked about")
    score: Optional[ScoreInfo] = None


# =============================================================================
# Conversion helpers
# =============================================================================

def parse_answer(game: str, data: Any) -> BaseModel:
    """Validate raw answer data for a game; already-built models pass through."""
    model = {"grid": GridAnswer, "voxel": CubeAnswer, "die": DieAnswer}.get(game)
    if model is None:
        raise ValueError(f"Unknown game: {game}")
    if isinstance(data, model):
        return data
    if game == "grid" and isinstance(data, list):
        data = {"rows": data}
    elif game == "voxel" and isinstance(data, dict) and "cells" not in data:
        data = {"cells": data}
    elif game == "die" and (data is None or isinstance(data, str)):
        data = {"value": data or ""}
    return model.model_validate(data)


def state_to_data(state: Any) -> Any:
    """Plain data for a configuration."""
    if isinstance(state, GridState):
        return state.to_rows()
    if isinstance(state, DieState):
        return state.faces()
    if isinstance(state, CubeState):
        return [
            {"identity": v.identity, "x": v.x, "y": v.y, "z": v.z, "present": v.present}
            for v in state
        ]
    raise TypeError(f"Unsupported configuration type: {type(state).__name__}")


def command_info(command: Command) -> CommandInfo:
    return CommandInfo(
        command_id=command.command_id,
        kind=command.kind.value,
        description=command.description,
        params=command.params.to_dict(),
    )


def history_step_info(step: HistoryStep) -> HistoryStepInfo:
    return HistoryStepInfo(
        step_index=step.step_index,
        command_description=step.command_description,
        state=state_to_data(step.state),
    )


def score_info(score: ScoreResult) -> ScoreInfo:
    return ScoreInfo(
        correct_count=score.correct_count,
        total_cells=score.total_cells,
        is_perfect=score.is_perfect,
        marks={_mark_key(key): ok for key, ok in score.marks.items()},
    )


def _mark_key(key: Any) -> str:
    if isinstance(key, tuple):
        return "-".join(str(part) for part in key)
    return str(key)


__all__ = [
    "GameName",
    "GridAnswer",
    "CubeAnswer",
    "DieAnswer",
    "CommandInfo",
    "HistoryStepInfo",
    "ScoreInfo",
    "SessionExport",
    "parse_answer",
    "state_to_data",
    "command_info",
    "history_step_info",
    "score_info",
]
