"""
Configuration - Per-game settings.

Each game has:
- A default number of commands per session
- Command-kind weights (how often each kind is drawn)
- Phase timing for the reveal (milliseconds)

The weights are tuning parameters, not rules: different revisions
of the games used different rotation odds, so they live here
rather than in the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from .engine_core.command import CommandKind
from .games.die.commands import DEFAULT_DIE_WEIGHTS, DieCommandKind
from .games.grid.commands import DEFAULT_GRID_WEIGHTS, GridCommandKind
from .games.voxel.commands import DEFAULT_VOXEL_WEIGHTS, VoxelCommandKind


@dataclass
class PhaseTiming:
    """
    Timing of the reveal, in milliseconds.

    memorize_ms: how long the starting configuration is shown
    command_gap_ms: blank pause before each command appears
    command_show_ms: how long each command stays on screen
    """
    memorize_ms: int = 0
    command_gap_ms: int = 0
    command_show_ms: int = 0

    def __post_init__(self):
        for name in ("memorize_ms", "command_gap_ms", "command_show_ms"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")

    @property
    def is_instant(self) -> bool:
        return self.memorize_ms == self.command_gap_ms == self.command_show_ms == 0

    def scaled(self, factor: float) -> PhaseTiming:
        """Same rhythm, faster or slower."""
        return PhaseTiming(
            memorize_ms=int(self.memorize_ms * factor),
            command_gap_ms=int(self.command_gap_ms * factor),
            command_show_ms=int(self.command_show_ms * factor),
        )


@dataclass
class DomainConfig:
    """Settings shared by every game."""
    kind_type: ClassVar[type[CommandKind]] = CommandKind

    command_count: int = 0
    weights: dict[str, float] = field(default_factory=dict)
    timing: PhaseTiming = field(default_factory=PhaseTiming)

    def __post_init__(self):
        if not isinstance(self.command_count, int) or self.command_count < 0:
            raise ValueError("command_count must be a non-negative integer")
        self.kind_weights()

    def kind_weights(self) -> dict[CommandKind, float]:
        """Weights keyed by command kind; raises ValueError on bad entries."""
        known = {kind.value: kind for kind in self.kind_type}
        unknown = sorted(set(self.weights) - set(known))
        if unknown:
            raise ValueError(f"Unknown command kinds for {self.kind_type.__name__}: {unknown}")
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("weights must be non-negative")
        if sum(self.weights.values()) <= 0:
            raise ValueError("weights must have a positive total")
        return {known[name]: float(w) for name, w in self.weights.items()}

    def with_weights(self, overrides: Mapping[str, float]) -> dict[str, float]:
        return {**self.weights, **overrides}


@dataclass
class GridConfig(DomainConfig):
    """
    Blind Grid settings.

    shuffle_initial: start from a shuffled 1..9 instead of reading order
    set_row_value: constant written by set-row commands
    """
    kind_type: ClassVar[type[CommandKind]] = GridCommandKind

    command_count: int = 3
    weights: dict[str, float] = field(
        default_factory=lambda: {k.value: w for k, w in DEFAULT_GRID_WEIGHTS.items()}
    )
    timing: PhaseTiming = field(
        default_factory=lambda: PhaseTiming(memorize_ms=5000, command_gap_ms=600, command_show_ms=4000)
    )
    shuffle_initial: bool = True
    set_row_value: int = 0

    def __post_init__(self):
        super().__post_init__()
        # Answers are typed into 2-character cells
        if not isinstance(self.set_row_value, int) or not 0 <= self.set_row_value <= 99:
            raise ValueError("set_row_value must be between 0 and 99")


@dataclass
class DieConfig(DomainConfig):
    """Invisible Die settings. All commands are shown at once."""
    kind_type: ClassVar[type[CommandKind]] = DieCommandKind

    command_count: int = 5
    weights: dict[str, float] = field(
        default_factory=lambda: {k.value: w for k, w in DEFAULT_DIE_WEIGHTS.items()}
    )
    timing: PhaseTiming = field(default_factory=PhaseTiming)


@dataclass
class VoxelConfig(DomainConfig):
    """Voxel Carver settings."""
    kind_type: ClassVar[type[CommandKind]] = VoxelCommandKind

    command_count: int = 4
    weights: dict[str, float] = field(
        default_factory=lambda: {k.value: w for k, w in DEFAULT_VOXEL_WEIGHTS.items()}
    )
    timing: PhaseTiming = field(
        default_factory=lambda: PhaseTiming(memorize_ms=6000, command_gap_ms=800, command_show_ms=4000)
    )


@dataclass
class GameConfig:
    """Settings for all three games."""
    grid: GridConfig = field(default_factory=GridConfig)
    die: DieConfig = field(default_factory=DieConfig)
    voxel: VoxelConfig = field(default_factory=VoxelConfig)

    def for_domain(self, domain: str) -> DomainConfig:
        if domain not in ("grid", "die", "voxel"):
            raise ValueError(f"Unknown game: {domain}")
        return getattr(self, domain)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameConfig:
        """
        Build from plain data, e.g. {"grid": {"command_count": 5}}.

        Timing may be given as a nested dict.
        """
        unknown = sorted(set(data) - {"grid", "die", "voxel"})
        if unknown:
            raise ValueError(f"Unknown games in config: {unknown}")

        sections = {}
        for name, config_cls in (("grid", GridConfig), ("die", DieConfig), ("voxel", VoxelConfig)):
            section = dict(data.get(name, {}))
            if isinstance(section.get("timing"), Mapping):
                section["timing"] = PhaseTiming(**section["timing"])
            sections[name] = config_cls(**section)
        return cls(**sections)
