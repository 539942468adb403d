"""
Tests for the command model and generators.

Tests:
- Construction-time validation
- Descriptions derived from parameters
- Weighted, reproducible generation
"""

import random

import pytest

from ..engine_core import (
    Command,
    CommandParams,
    MalformedCommandError,
    UnknownCommandError,
    new_command_id,
)
from ..games.die import DieCommandGenerator, DieCommandKind
from ..games.grid import (
    GridCommandGenerator,
    GridCommandKind,
    rotate_cw,
    set_row,
    swap,
)
from ..games.voxel import LASER_LINES, VoxelCommandGenerator, VoxelCommandKind, laser_z


class TestCommandValidation:
    """Commands are rejected at construction when malformed."""

    def test_swap_missing_params(self):
        """Swap without its second cell is malformed."""
        with pytest.raises(MalformedCommandError) as exc_info:
            Command(
                kind=GridCommandKind.SWAP,
                description="Swap",
                params=CommandParams(r1=0, c1=0),
            )
        assert exc_info.value.kind == "swap"
        assert any("r2" in p and "c2" in p for p in exc_info.value.problems)

    def test_index_out_of_range(self):
        """Cell indexes above 2 are rejected."""
        with pytest.raises(MalformedCommandError):
            swap(0, 0, 3, 1)

    def test_negative_index(self):
        """Negative rows are rejected."""
        with pytest.raises(MalformedCommandError):
            set_row(-1)

    def test_bool_is_not_an_index(self):
        """True is not accepted as coordinate 1."""
        with pytest.raises(MalformedCommandError):
            laser_z(True, 0)

    def test_empty_description(self):
        """Every command needs a description."""
        with pytest.raises(MalformedCommandError):
            Command(kind=GridCommandKind.ROTATE_CW, description="")

    def test_kind_must_be_command_kind(self):
        """A plain string is not a command kind."""
        with pytest.raises(MalformedCommandError):
            Command(kind="rotate_cw", description="Rotate")

    def test_malformed_is_a_value_error(self):
        """Callers catching ValueError also see malformed commands."""
        with pytest.raises(ValueError):
            set_row(5)

    def test_reports_every_problem(self):
        """All problems are reported together."""
        with pytest.raises(MalformedCommandError) as exc_info:
            Command(
                kind=GridCommandKind.SWAP,
                description="",
                params=CommandParams(r1=9, c1=0, r2=0),
            )
        assert len(exc_info.value.problems) == 3


class TestDescriptions:
    """Descriptions are built from the same parameters that execute."""

    def test_swap_description(self):
        """Swap names both cells."""
        assert swap(0, 1, 2, 2).description == "Swap (0,1) with (2,2)"

    def test_set_row_is_one_based(self):
        """Set-row text counts rows from 1."""
        assert set_row(0).description == "Set Row 1 to all Zeros"
        assert set_row(2, value=7).description == "Set Row 3 to all 7s"

    def test_laser_description(self):
        """Laser text names the line in 1-based terms."""
        assert laser_z(0, 2).description == "Fire Laser Front-to-Back at Col 1, Row 3"

    def test_to_dict_drops_unset_params(self):
        """Only the parameters a command uses are exported."""
        data = swap(0, 1, 2, 2, command_id="abc").to_dict()
        assert data == {
            "command_id": "abc",
            "domain": "grid",
            "kind": "swap",
            "description": "Swap (0,1) with (2,2)",
            "params": {"r1": 0, "c1": 1, "r2": 2, "c2": 2},
        }
        assert rotate_cw().to_dict()["params"] == {}


class TestCommandIds:
    """Tests for command ids."""

    def test_seeded_ids_repeat(self):
        """Seeded ids are reproducible."""
        assert new_command_id(random.Random(5)) == new_command_id(random.Random(5))

    def test_unseeded_ids_differ(self):
        """Unseeded ids are unique."""
        assert new_command_id() != new_command_id()


class TestGenerators:
    """Weighted random generation."""

    def test_generates_requested_count(self, rng):
        """Generator returns exactly count commands."""
        commands = GridCommandGenerator(rng=rng).generate(7)
        assert len(commands) == 7
        assert all(c.domain == "grid" for c in commands)

    def test_zero_commands(self, rng):
        """Count 0 gives an empty sequence."""
        assert GridCommandGenerator(rng=rng).generate(0) == []

    def test_negative_count(self, rng):
        """Negative counts are rejected."""
        with pytest.raises(ValueError):
            GridCommandGenerator(rng=rng).generate(-1)

    def test_same_seed_same_sequence(self):
        """Same seed, same commands."""
        first = GridCommandGenerator(rng=random.Random(42)).generate(10)
        second = GridCommandGenerator(rng=random.Random(42)).generate(10)
        assert [c.to_dict() for c in first] == [c.to_dict() for c in second]

    def test_swap_cells_are_distinct(self, rng):
        """Generated swaps never swap a cell with itself."""
        generator = GridCommandGenerator(weights={GridCommandKind.SWAP: 1.0}, rng=rng)
        for command in generator.generate(200):
            p = command.params
            assert (p.r1, p.c1) != (p.r2, p.c2)

    def test_zero_weight_kind_never_drawn(self, rng):
        """A kind with weight 0 never appears."""
        generator = GridCommandGenerator(
            weights={GridCommandKind.ROTATE_CW: 1.0, GridCommandKind.SWAP: 0.0},
            rng=rng,
        )
        assert {c.kind for c in generator.generate(50)} == {GridCommandKind.ROTATE_CW}

    def test_set_row_value(self, rng):
        """Generated set-row commands use the configured value."""
        generator = GridCommandGenerator(
            weights={GridCommandKind.SET_ROW: 1.0}, rng=rng, set_row_value=4
        )
        assert all(c.params.value == 4 for c in generator.generate(10))

    def test_bad_weight_tables(self, rng):
        """Empty, negative and all-zero weight tables are rejected."""
        with pytest.raises(ValueError):
            GridCommandGenerator(weights={}, rng=rng)
        with pytest.raises(ValueError):
            GridCommandGenerator(weights={GridCommandKind.SWAP: -1.0}, rng=rng)
        with pytest.raises(ValueError):
            GridCommandGenerator(weights={GridCommandKind.SWAP: 0.0}, rng=rng)

    def test_build_unknown_kind(self, rng):
        """Building another game's kind fails."""
        with pytest.raises(UnknownCommandError):
            GridCommandGenerator(rng=rng).build(DieCommandKind.ROLL_LEFT)

    def test_die_generator_covers_every_kind(self, rng):
        """Uniform die weights reach all six kinds."""
        kinds = {c.kind for c in DieCommandGenerator(rng=rng).generate(300)}
        assert kinds == set(DieCommandKind)

    def test_voxel_lasers_carry_targets(self, rng):
        """Generated lasers always name a valid line."""
        for command in VoxelCommandGenerator(rng=rng).generate(100):
            if command.kind in LASER_LINES:
                assert 0 <= command.params.target1 <= 2
                assert 0 <= command.params.target2 <= 2
            else:
                assert command.kind == VoxelCommandKind.ROTATE_Y
