"""
Engine Errors - Exception hierarchy for the engine and session layer.

The transformation and scoring functions are total over well-formed input.
These exceptions signal construction bugs (malformed commands), misuse
(a command handed to the wrong domain), or session lifecycle violations.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine errors."""


class MalformedCommandError(EngineError, ValueError):
    """Raised when a command is built with missing or invalid parameters."""

    def __init__(self, kind: str, problems: list[str]):
        self.kind = kind
        self.problems = problems
        super().__init__(f"Malformed {kind} command: {'; '.join(problems)}")


class UnknownCommandError(EngineError):
    """Raised when a reducer has no handler for a command kind."""


class SessionError(EngineError):
    """Base class for session lifecycle errors."""


class StaleSessionError(SessionError):
    """Raised when operating on a session that a newer one has superseded."""


class AlreadySubmittedError(SessionError):
    """Raised when a session receives a second answer submission."""
