"""
Reducer - Applies commands to configurations.

The reducer is the single point of state transformation.
Every configuration change goes through apply().

Design principles:
- Pure function: (state, command) -> new_state
- The input state is never modified
- run() replays a whole sequence and records every intermediate state
- No randomness: everything random is resolved inside the commands
"""

from __future__ import annotations
import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .command import Command, CommandKind
from .errors import UnknownCommandError

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Command], Any]


@dataclass(frozen=True)
class HistoryStep:
    """
    One recorded configuration in a replay.

    Step 0 is the starting configuration; step i is the
    configuration after the i-th command.
    """
    step_index: int
    command_description: str
    state: Any


@dataclass(frozen=True)
class SequenceResult:
    """Result of replaying a command sequence."""
    initial_state: Any
    final_state: Any
    commands: tuple[Command, ...]
    history: tuple[HistoryStep, ...]

    @property
    def step_count(self) -> int:
        """Number of commands applied (one less than the history length)."""
        return len(self.commands)


def snapshot(state: Any) -> Any:
    """Structurally independent copy of a configuration."""
    return deepcopy(state)


class Reducer:
    """
    Reducer applies commands to one domain's configurations.

    Stateless - all state is in the configuration.
    Subclasses provide the handler table for their command kinds.
    """
    domain: str = ""
    start_description: str = "Start Configuration"

    def apply(self, state: Any, command: Command) -> Any:
        """
        Apply a command to a configuration.

        Returns the new configuration; raises UnknownCommandError
        if the command belongs to another domain.
        """
        handler = self._get_handler(command.kind)
        if handler is None:
            raise UnknownCommandError(
                f"{self.domain} reducer has no handler for {command.domain}:{command.kind.value}"
            )

        new_state = handler(state, command)
        logger.debug("%s: applied %s", self.domain, command.description)
        return new_state

    def run(self, initial_state: Any, commands: Iterable[Command]) -> SequenceResult:
        """
        Replay commands left to right, recording every configuration.

        The history always has one more entry than there are commands.
        """
        commands = tuple(commands)
        current = snapshot(initial_state)
        history = [HistoryStep(0, self.start_description, snapshot(current))]

        for step_index, command in enumerate(commands, start=1):
            current = self.apply(current, command)
            history.append(HistoryStep(step_index, command.description, snapshot(current)))

        logger.debug("%s: replayed %d command(s)", self.domain, len(commands))
        return SequenceResult(
            initial_state=snapshot(initial_state),
            final_state=current,
            commands=commands,
            history=tuple(history),
        )

    def _get_handler(self, kind: CommandKind) -> Handler | None:
        """Get the handler function for a command kind."""
        return self._handlers().get(kind)

    def _handlers(self) -> dict[CommandKind, Handler]:
        raise NotImplementedError
