"""
Command System - Commands, parameters, and kinds.

A command is one discrete transformation of a configuration:
1. Grid commands (rotate, swap, mirror, set row)
2. Die commands (rolls and spins)
3. Voxel commands (rotation and lasers)

Commands are immutable. They are validated when built, so a command
that made it into a sequence always carries every parameter its kind needs.
"""

from __future__ import annotations
import random
import uuid
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from .errors import MalformedCommandError

# Every domain works on a 3-wide structure (3x3 grid, 3x3x3 cube)
SIZE = 3

# Parameters that address a row, column or axis position
INDEX_PARAMS = ("r1", "c1", "r2", "c2", "row", "target1", "target2")


class CommandKind(Enum):
    """
    Base for per-domain command kinds.

    Each domain subclasses this with its own members and declares
    which parameters each kind needs.
    """

    @property
    def domain(self) -> str:
        raise NotImplementedError

    @property
    def required_params(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class CommandParams:
    """
    Parameters for a command.

    Different kinds use different fields; unused fields stay None.
    Which fields are required is declared by the kind.
    """
    # Grid cells (swap)
    r1: int | None = None
    c1: int | None = None
    r2: int | None = None
    c2: int | None = None

    # Grid row fill (set row)
    row: int | None = None
    value: int | None = None

    # Voxel laser line (the two fixed coordinates)
    target1: int | None = None
    target2: int | None = None

    def to_dict(self) -> dict[str, int]:
        """Only the fields that are set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class Command:
    """
    A complete command to be applied to a configuration.

    Commands are:
    - Generated, never mutated
    - Validated on construction
    - Described by text derived from the same parameters used to execute them
    """
    kind: CommandKind
    description: str
    params: CommandParams = field(default_factory=CommandParams)
    command_id: str = ""

    def __post_init__(self):
        problems = _validate(self.kind, self.description, self.params)
        if problems:
            raise MalformedCommandError(getattr(self.kind, "value", repr(self.kind)), problems)

    @property
    def domain(self) -> str:
        return self.kind.domain

    def to_dict(self) -> dict[str, Any]:
        return {
            "command_id": self.command_id,
            "domain": self.domain,
            "kind": self.kind.value,
            "description": self.description,
            "params": self.params.to_dict(),
        }


def _validate(kind: CommandKind, description: str, params: CommandParams) -> list[str]:
    """Collect every problem with a command; empty list means valid."""
    problems = []

    if not isinstance(kind, CommandKind):
        return [f"kind must be a CommandKind, got {kind!r}"]

    if not description:
        problems.append("description is required")

    missing = [name for name in kind.required_params if getattr(params, name) is None]
    if missing:
        problems.append(f"missing parameters: {', '.join(missing)}")

    for name in INDEX_PARAMS:
        index = getattr(params, name)
        if index is None:
            continue
        if isinstance(index, bool) or not isinstance(index, int):
            problems.append(f"{name} must be an int, got {index!r}")
        elif not 0 <= index < SIZE:
            problems.append(f"{name} out of range: {index}")

    if params.value is not None and (
        isinstance(params.value, bool) or not isinstance(params.value, int)
    ):
        problems.append(f"value must be an int, got {params.value!r}")

    return problems


def new_command_id(rng: random.Random | None = None) -> str:
    """Command id drawn from rng, so seeded sequences are reproducible."""
    if rng is None:
        return str(uuid.uuid4())
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def one_based(index: int | None) -> int | str:
    """Position as shown to players (1-based); '?' when missing."""
    if isinstance(index, int) and not isinstance(index, bool):
        return index + 1
    return "?"
