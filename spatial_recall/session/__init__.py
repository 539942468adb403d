"""
Session Module - Runs one play-through of a game.

A session:
- Is created when the player starts a game
- Holds the starting configuration, commands, and replay history
- Reveals commands on cancellable timers
- Accepts one answer and scores it

Sessions are ephemeral: nothing is persisted, and starting a new
session discards the previous one.
"""

from .manager import SessionManager, Session, export_session
from .phases import Phase, PhaseEvent, PhaseScheduler, build_timeline

__all__ = [
    "SessionManager",
    "Session",
    "export_session",
    "Phase",
    "PhaseEvent",
    "PhaseScheduler",
    "build_timeline",
]
