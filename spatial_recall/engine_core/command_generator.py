"""
Command Generator - Produces random command sequences.

The generator is used by:
1. Sessions, to build the sequence a player must follow
2. Tests, with a seeded random source for reproducible sequences

Design: Generates Command objects, not just kinds.
Every generated command is fully specified and described.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Mapping

from .command import SIZE, Command, CommandKind, new_command_id
from .errors import UnknownCommandError

logger = logging.getLogger(__name__)

Builder = Callable[[], Command]


@dataclass
class CommandGenerator:
    """
    Generates random commands for one domain.

    The kind of each command is drawn independently from the
    weight table; parameters are drawn by the kind's builder.
    """
    weights: Mapping[CommandKind, float]
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        if not self.weights:
            raise ValueError("weights must name at least one command kind")
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("weights must be non-negative")
        if sum(self.weights.values()) <= 0:
            raise ValueError("weights must have a positive total")

    def generate(self, count: int) -> list[Command]:
        """
        Generate an ordered sequence of count commands.

        Returns an empty list for count == 0.
        """
        if count < 0:
            raise ValueError("count must be >= 0")

        kinds = list(self.weights)
        weights = [self.weights[k] for k in kinds]

        commands = [self.build(self.rng.choices(kinds, weights=weights)[0]) for _ in range(count)]
        logger.debug("generated %d command(s): %s", count, [c.kind.value for c in commands])
        return commands

    def build(self, kind: CommandKind) -> Command:
        """Build one command of the given kind with random parameters."""
        builder = self._get_builder(kind)
        if builder is None:
            raise UnknownCommandError(f"No builder for command kind: {kind}")
        return builder()

    def _get_builder(self, kind: CommandKind) -> Builder | None:
        return self._builders().get(kind)

    def _builders(self) -> dict[CommandKind, Builder]:
        raise NotImplementedError

    def _new_id(self) -> str:
        return new_command_id(self.rng)

    def _index(self) -> int:
        """Uniform position along one axis."""
        return self.rng.randrange(SIZE)
