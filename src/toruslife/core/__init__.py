"""Grid engine and simulation logic."""

from .grid import (
    Grid,
    InvalidDimensionsError,
    count_surround,
    dimensions,
    get_current,
    make_grid,
    set_next,
    wrap,
)
from .game import GameOfLife, advance, next_state
from .patterns import Pattern, GLIDER_SEED, DEFAULT_SEED

__all__ = [
    "Grid",
    "InvalidDimensionsError",
    "count_surround",
    "dimensions",
    "get_current",
    "make_grid",
    "set_next",
    "wrap",
    "GameOfLife",
    "advance",
    "next_state",
    "Pattern",
    "GLIDER_SEED",
    "DEFAULT_SEED",
]
