"""Basic tests for the toruslife package."""

from toruslife import DEFAULT_SEED, GameOfLife, Grid, advance, make_grid


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = make_grid(10, 10)
    assert grid.shape == (10, 10)
    assert grid.get_current(0, 0) == 0

    grid.set_cell(5, 5, True)
    assert grid.get_current(5, 5) == 1


def test_game_creation():
    """Test basic game creation."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_cell(2, 2, True)
    assert game.population == 1


def test_default_seed_runs():
    """Test the default seed can be advanced."""
    grid = DEFAULT_SEED.to_grid()
    advance(grid)
    assert grid.population == 5
    assert grid.is_clean()


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)

    # Vertical blinker in the middle column
    grid.set_cell(1, 2, True)
    grid.set_cell(2, 2, True)
    grid.set_cell(3, 2, True)

    game.step()
    assert game.population == 3
    assert grid.get_current(2, 1) == 1
    assert grid.get_current(2, 2) == 1
    assert grid.get_current(2, 3) == 1

    game.step()
    assert game.population == 3
    assert grid.get_current(1, 2) == 1
    assert grid.get_current(2, 2) == 1
    assert grid.get_current(3, 2) == 1
