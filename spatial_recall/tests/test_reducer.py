"""
Tests for sequence replay and the audit trail.

Tests:
- History length and labels
- Fold property between consecutive snapshots
- Snapshot independence
- Cross-domain commands are rejected
"""

import pytest

from ..engine_core import UnknownCommandError
from ..games import registry
from ..games.die import roll_forward
from ..games.grid import GridReducer, mirror_horizontal, rotate_cw, set_row, swap
from ..games.voxel import laser_z, rotate_y


class TestHistory:
    """Tests for the replay audit trail."""

    @pytest.fixture
    def commands(self):
        """One command of each grid kind."""
        return [swap(0, 0, 1, 1), rotate_cw(), mirror_horizontal(), set_row(2)]

    def test_history_length(self, ordered_grid, commands):
        """History has one entry more than there are commands."""
        result = GridReducer().run(ordered_grid, commands)
        assert len(result.history) == len(commands) + 1
        assert result.step_count == len(commands)

    def test_first_entry_is_start(self, ordered_grid, commands):
        """Entry 0 is the untouched start configuration."""
        result = GridReducer().run(ordered_grid, commands)
        first = result.history[0]
        assert first.step_index == 0
        assert first.command_description == "Start Configuration"
        assert first.state == ordered_grid

    def test_entries_follow_commands(self, ordered_grid, commands):
        """Each entry is the previous one with its command applied."""
        reducer = GridReducer()
        result = reducer.run(ordered_grid, commands)
        for i, command in enumerate(commands):
            step = result.history[i + 1]
            assert step.step_index == i + 1
            assert step.command_description == command.description
            assert step.state == reducer.apply(result.history[i].state, command)
        assert result.history[-1].state == result.final_state

    def test_empty_sequence(self, ordered_grid):
        """No commands leaves only the start entry."""
        result = GridReducer().run(ordered_grid, [])
        assert len(result.history) == 1
        assert result.final_state == ordered_grid

    def test_snapshots_are_independent(self, ordered_grid, commands):
        """Every entry is its own object."""
        result = GridReducer().run(ordered_grid, commands)
        states = [step.state for step in result.history]
        assert len({id(s) for s in states}) == len(states)
        assert result.history[0].state is not ordered_grid

    def test_die_start_label(self, canonical_die):
        """The die labels its start as the initial position."""
        result = registry.run_sequence("die", canonical_die, [roll_forward()])
        assert result.history[0].command_description == "Initial Position"


class TestDispatch:
    """Tests for routing commands to the right reducer."""

    def test_registry_dispatches_by_domain(self, ordered_grid, ordered_cube):
        """Commands find their game's reducer."""
        assert registry.apply_command(ordered_grid, rotate_cw()).cell(0, 0) == 7
        assert registry.apply_command(ordered_cube, rotate_y()).get(1).coord == (2, 0, 0)

    def test_cross_domain_command(self, ordered_grid):
        """A grid reducer refuses voxel commands."""
        with pytest.raises(UnknownCommandError):
            GridReducer().apply(ordered_grid, laser_z(0, 0))

    def test_unknown_game(self):
        """Unknown game names are rejected."""
        with pytest.raises(ValueError):
            registry.get_game("chess")
