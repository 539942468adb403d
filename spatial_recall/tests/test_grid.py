"""
Tests for Blind Grid.

Tests:
- Setup (ordered and shuffled grids)
- Each command's transformation
- Algebraic properties (rotation order 4, mirror involution)
"""

import random

import pytest

from ..games.grid import (
    GridCommandGenerator,
    GridCommandKind,
    GridReducer,
    GridState,
    apply_command,
    create_ordered_grid,
    create_random_grid,
    mirror_horizontal,
    rotate_cw,
    run_sequence,
    set_row,
    swap,
)


class TestGridSetup:
    """Tests for starting grids."""

    def test_ordered_grid(self, ordered_grid):
        """Reading order is 1..9 row by row."""
        assert ordered_grid.to_rows() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_random_grid_is_permutation(self, rng):
        """A shuffled grid holds each of 1..9 once."""
        grid = create_random_grid(rng)
        assert sorted(v for _, _, v in grid.cells()) == list(range(1, 10))

    def test_random_grid_reproducible(self):
        """Same seed, same grid."""
        assert create_random_grid(random.Random(3)) == create_random_grid(random.Random(3))

    def test_state_shape_checked(self):
        """Grids must be 3x3."""
        with pytest.raises(ValueError):
            GridState.from_rows([[1, 2, 3], [4, 5, 6]])

    def test_with_cell(self, ordered_grid):
        """with_cell returns a new grid and leaves the old one alone."""
        changed = ordered_grid.with_cell(1, 2, 0)
        assert changed.to_rows() == [[1, 2, 3], [4, 5, 0], [7, 8, 9]]
        assert ordered_grid.cell(1, 2) == 6


class TestGridCommands:
    """Each command against the reading-order grid."""

    def test_rotate_cw(self, ordered_grid):
        """Left column becomes the top row."""
        result = apply_command(ordered_grid, rotate_cw())
        assert result.to_rows() == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]

    def test_mirror_horizontal(self, ordered_grid):
        """Every row is reversed."""
        result = apply_command(ordered_grid, mirror_horizontal())
        assert result.to_rows() == [[3, 2, 1], [6, 5, 4], [9, 8, 7]]

    def test_swap(self, ordered_grid):
        """Two cells exchange values."""
        result = apply_command(ordered_grid, swap(0, 0, 1, 1))
        assert result.to_rows() == [[5, 2, 3], [4, 1, 6], [7, 8, 9]]

    def test_set_row(self, ordered_grid):
        """Set-row writes zeros by default."""
        result = apply_command(ordered_grid, set_row(1))
        assert result.to_rows() == [[1, 2, 3], [0, 0, 0], [7, 8, 9]]

    def test_set_row_custom_value(self, ordered_grid):
        """Set-row writes the given value."""
        result = apply_command(ordered_grid, set_row(2, value=4))
        assert result.to_rows()[2] == [4, 4, 4]

    def test_input_not_mutated(self, ordered_grid):
        """Commands return new grids."""
        before = ordered_grid.to_rows()
        apply_command(ordered_grid, swap(0, 0, 2, 2))
        apply_command(ordered_grid, set_row(0))
        assert ordered_grid.to_rows() == before

    def test_swap_then_rotate(self, ordered_grid):
        """Commands apply left to right."""
        result = run_sequence(ordered_grid, [swap(0, 0, 1, 1), rotate_cw()])
        assert result.final_state.to_rows() == [[7, 4, 5], [8, 1, 2], [9, 6, 3]]


class TestGridProperties:
    """Properties that hold for any starting grid."""

    @pytest.fixture
    def grids(self):
        """Ten shuffled grids from a fixed seed."""
        rng = random.Random(99)
        return [create_random_grid(rng) for _ in range(10)]

    def test_four_rotations_are_identity(self, grids):
        """Four rotations return to the start."""
        for grid in grids:
            assert run_sequence(grid, [rotate_cw()] * 4).final_state == grid

    def test_double_mirror_is_identity(self, grids):
        """Mirroring twice returns to the start."""
        for grid in grids:
            assert run_sequence(grid, [mirror_horizontal()] * 2).final_state == grid

    def test_swap_is_involution(self, grids):
        """Swapping the same cells twice returns to the start."""
        for grid in grids:
            assert run_sequence(grid, [swap(0, 2, 2, 1)] * 2).final_state == grid

    def test_without_set_row_values_are_preserved(self, grids, rng):
        """Only set-row can change which values are present."""
        weights = {
            GridCommandKind.ROTATE_CW: 1.0,
            GridCommandKind.SWAP: 1.0,
            GridCommandKind.MIRROR_HORIZONTAL: 1.0,
        }
        commands = GridCommandGenerator(weights=weights, rng=rng).generate(20)
        for grid in grids:
            final = GridReducer().run(grid, commands).final_state
            assert sorted(v for _, _, v in final.cells()) == list(range(1, 10))
