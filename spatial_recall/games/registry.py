"""
Game Registry - One entry per game, used by sessions and the CLI.

An entry knows how to build the starting configuration, the command
generator, and the reducer for its game from a DomainConfig.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Callable

from ..config import DieConfig, DomainConfig, GridConfig, VoxelConfig
from ..engine_core.command import Command
from ..engine_core.command_generator import CommandGenerator
from ..engine_core.errors import UnknownCommandError
from ..engine_core.reducer import Reducer, SequenceResult
from .die import DieCommandGenerator, DieReducer, create_canonical_die
from .grid import GridCommandGenerator, GridReducer, create_ordered_grid, create_random_grid
from .voxel import VoxelCommandGenerator, VoxelReducer, create_ordered_cube


@dataclass(frozen=True)
class GameDefinition:
    """How to set up and run one game."""
    name: str
    title: str
    reducer: Reducer
    create_initial: Callable[[random.Random, Any], Any]
    create_generator: Callable[[random.Random, Any], CommandGenerator]

    def initial_state(self, rng: random.Random, config: DomainConfig) -> Any:
        return self.create_initial(rng, config)

    def generator(self, rng: random.Random, config: DomainConfig) -> CommandGenerator:
        return self.create_generator(rng, config)


def _grid_initial(rng: random.Random, config: GridConfig):
    return create_random_grid(rng) if config.shuffle_initial else create_ordered_grid()


def _grid_generator(rng: random.Random, config: GridConfig) -> CommandGenerator:
    return GridCommandGenerator(
        weights=config.kind_weights(), rng=rng, set_row_value=config.set_row_value
    )


def _die_generator(rng: random.Random, config: DieConfig) -> CommandGenerator:
    return DieCommandGenerator(weights=config.kind_weights(), rng=rng)


def _voxel_generator(rng: random.Random, config: VoxelConfig) -> CommandGenerator:
    return VoxelCommandGenerator(weights=config.kind_weights(), rng=rng)


GAMES: dict[str, GameDefinition] = {
    "grid": GameDefinition(
        name="grid",
        title="Blind Grid",
        reducer=GridReducer(),
        create_initial=_grid_initial,
        create_generator=_grid_generator,
    ),
    "die": GameDefinition(
        name="die",
        title="The Invisible Die",
        reducer=DieReducer(),
        create_initial=lambda rng, config: create_canonical_die(),
        create_generator=_die_generator,
    ),
    "voxel": GameDefinition(
        name="voxel",
        title="Voxel Carver",
        reducer=VoxelReducer(),
        create_initial=lambda rng, config: create_ordered_cube(),
        create_generator=_voxel_generator,
    ),
}


def get_game(name: str) -> GameDefinition:
    try:
        return GAMES[name]
    except KeyError:
        raise ValueError(f"Unknown game: {name} (expected one of {sorted(GAMES)})") from None


def apply_command(state: Any, command: Command) -> Any:
    """Apply a command using the reducer of the command's own game."""
    if command.domain not in GAMES:
        raise UnknownCommandError(f"No game for command domain: {command.domain}")
    return GAMES[command.domain].reducer.apply(state, command)


def run_sequence(game: str, initial: Any, commands: list[Command]) -> SequenceResult:
    """Replay commands for a named game."""
    return get_game(game).reducer.run(initial, commands)
