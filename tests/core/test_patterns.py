"""Tests for the Pattern class and the built-in seed."""

import pytest
from toruslife.core.grid import Grid, InvalidDimensionsError
from toruslife.core.patterns import DEFAULT_SEED, GLIDER_SEED, Pattern


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (0, 1), (0, 2)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"
        assert pattern.metadata == {}

    def test_from_matrix(self):
        """Test reading a pattern from a matrix literal."""
        pattern = Pattern.from_matrix("Glider", GLIDER_SEED)

        assert pattern.cells == [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
        assert pattern.metadata == {"matrix_size": (10, 10)}

    def test_bounding_box_and_size(self):
        """Test pattern extent."""
        pattern = Pattern("Offset", [(2, 3), (4, 3), (3, 5)])
        assert pattern.get_bounding_box() == (2, 3, 4, 5)
        assert pattern.get_size() == (3, 3)

    def test_empty_pattern(self):
        """Test an empty pattern has a degenerate bounding box."""
        pattern = Pattern("Empty", [])
        assert pattern.get_bounding_box() == (0, 0, 0, 0)
        assert pattern.get_size() == (1, 1)

    def test_from_matrix_ragged(self):
        """Test ragged matrices are rejected."""
        with pytest.raises(InvalidDimensionsError):
            Pattern.from_matrix("Ragged", [[1], [1, 1]])

    def test_from_matrix_bad_values(self):
        """Test values other than 0 and 1 are rejected."""
        with pytest.raises(ValueError, match="0 or 1"):
            Pattern.from_matrix("Two", [[0, 2], [1, 0]])

        with pytest.raises(ValueError, match="0 or 1"):
            Pattern.from_matrix("Fractional", [[0.5, 1], [1.9, 0]])

    def test_from_matrix_empty(self):
        """Test empty matrices are rejected."""
        with pytest.raises(InvalidDimensionsError):
            Pattern.from_matrix("Empty", [])

    def test_to_grid(self):
        """Test building a grid at the original matrix size."""
        grid = Pattern.from_matrix("Glider", GLIDER_SEED).to_grid()
        assert grid.shape == (10, 10)
        assert grid.to_list() == GLIDER_SEED

    def test_to_grid_without_matrix_size(self):
        """Test patterns built from coordinates get a grid fitted to them."""
        grid = Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)]).to_grid()
        assert grid.shape == (2, 2)
        assert grid.population == 4

    def test_to_grid_normalizes_offset(self):
        """Test coordinate patterns are shifted to the grid origin."""
        grid = Pattern("Offset", [(2, 3), (4, 3), (3, 5)]).to_grid()
        assert grid.shape == (3, 3)
        assert sorted(grid.living_cells()) == [(0, 0), (1, 2), (2, 0)]

    def test_apply_to_grid(self):
        """Test laying a pattern down with an offset."""
        grid = Grid(6, 6)
        Pattern("Blinker", [(0, 0), (0, 1), (0, 2)]).apply_to_grid(grid, 2, 1)
        assert sorted(grid.living_cells()) == [(2, 1), (2, 2), (2, 3)]

    def test_apply_to_grid_wraps(self):
        """Test a pattern placed over the edge wraps around."""
        grid = Grid(5, 5)
        Pattern("Blinker", [(0, 0), (0, 1), (0, 2)]).apply_to_grid(grid, 4, 4)
        assert sorted(grid.living_cells()) == [(4, 0), (4, 1), (4, 4)]

    def test_apply_keeps_existing_cells(self):
        """Test applying a pattern leaves other cells alone."""
        grid = Grid(5, 5)
        grid.set_cell(0, 0, True)
        Pattern("Dot", [(0, 0)]).apply_to_grid(grid, 3, 3)
        assert grid.population == 2


class TestDefaultSeed:
    """Test cases for the built-in starting pattern."""

    def test_seed_matrix_shape(self):
        """Test the seed is a 10x10 0/1 matrix."""
        assert len(GLIDER_SEED) == 10
        assert all(len(row) == 10 for row in GLIDER_SEED)
        assert all(value in (0, 1) for row in GLIDER_SEED for value in row)

    def test_default_seed(self):
        """Test the default seed is the glider."""
        assert DEFAULT_SEED.name == "Glider"
        assert DEFAULT_SEED.get_size() == (3, 3)
        assert DEFAULT_SEED.to_grid().population == 5
