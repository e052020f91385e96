"""Conway's Game of Life on a toroidal grid, rendered to a terminal."""

__version__ = "0.1.0"

from .core.grid import Grid, InvalidDimensionsError, make_grid
from .core.game import GameOfLife, advance
from .core.patterns import Pattern, DEFAULT_SEED

__all__ = ["Grid", "InvalidDimensionsError", "make_grid", "GameOfLife", "advance", "Pattern", "DEFAULT_SEED"]
