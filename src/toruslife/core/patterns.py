"""Seed patterns for starting a simulation."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .grid import Grid


class Pattern:
    """A named set of living cells, relative to the pattern's origin."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells, x being the row
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    @classmethod
    def from_matrix(cls, name: str, matrix: Sequence[Sequence[int]], description: str = "") -> "Pattern":
        """Create a pattern from a 0/1 matrix literal.

        Args:
            name: Pattern name
            matrix: Rows of 0/1 values
            description: Optional description

        Returns:
            New Pattern with the matrix size recorded in its metadata

        Raises:
            InvalidDimensionsError: If the matrix is empty or ragged
            ValueError: If any value is not 0 or 1
        """
        grid = Grid.from_matrix(matrix)
        return cls(name, list(grid.living_cells()), description, {"matrix_size": grid.shape})

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def to_grid(self) -> Grid:
        """Build a grid holding this pattern.

        Patterns read from a matrix get a grid of that matrix's size; others
        get a grid fitted to their bounding box.
        """
        if "matrix_size" in self.metadata:
            rows, cols = self.metadata["matrix_size"]
            grid = Grid(rows, cols)
            self.apply_to_grid(grid)
        else:
            min_x, min_y, _, _ = self.get_bounding_box()
            grid = Grid(*self.get_size())
            self.apply_to_grid(grid, -min_x, -min_y)
        return grid

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Lay this pattern onto a grid, wrapping at the edges.

        Cells outside the pattern are left untouched.

        Args:
            grid: Target grid
            offset_x: Row offset
            offset_y: Column offset
        """
        for x, y in self.cells:
            grid.set_cell(x + offset_x, y + offset_y, True)


GLIDER_SEED = [
    [0, 1, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
]

DEFAULT_SEED = Pattern.from_matrix("Glider", GLIDER_SEED, "Glider crossing a 10x10 torus")
