"""
Engine Core - Deterministic configuration transforms, replay, and scoring.

The engine is the runtime that:
1. Describes commands (kind, parameters, text)
2. Generates random command sequences from an injected random source
3. Applies commands via per-game reducers
4. Replays sequences into an audit history
5. Scores user answers
"""

from .errors import (
    EngineError,
    MalformedCommandError,
    UnknownCommandError,
    SessionError,
    StaleSessionError,
    AlreadySubmittedError,
)
from .command import Command, CommandKind, CommandParams, SIZE, new_command_id
from .command_generator import CommandGenerator
from .reducer import Reducer, HistoryStep, SequenceResult, snapshot
from .scoring import ScoreResult, cell_matches, parse_cell

__all__ = [
    "EngineError",
    "MalformedCommandError",
    "UnknownCommandError",
    "SessionError",
    "StaleSessionError",
    "AlreadySubmittedError",
    "Command",
    "CommandKind",
    "CommandParams",
    "SIZE",
    "new_command_id",
    "CommandGenerator",
    "Reducer",
    "HistoryStep",
    "SequenceResult",
    "snapshot",
    "ScoreResult",
    "cell_matches",
    "parse_cell",
]
