"""Packed toroidal grid for the Game of Life engine.

Each cell is a small integer holding two generations at once:

* bit 0 is the cell's current state (1 alive, 0 dead)
* bit 1 is the staged next state, written during an update and
  promoted into bit 0 once every cell has been staged

Between updates bit 1 is always clear. Coordinates are ``(x, y)`` with
``x`` indexing rows and ``y`` indexing columns, and both wrap around the
grid edges so that the topology is a torus.
"""

from typing import Iterator, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

CURRENT_BIT = 0b01
STAGED_BIT = 0b10

# Moore neighborhood: four diagonals, then four orthogonals
NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)

_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class InvalidDimensionsError(ValueError):
    """Raised when a grid would have no rows or no columns."""


def wrap(value: int, size: int) -> int:
    """Map any integer coordinate onto ``[0, size)``.

    Every coordinate lookup on a grid goes through this helper.
    """
    return ((value % size) + size) % size


class Grid:
    """An ``m`` x ``n`` matrix of packed cell values with wraparound edges.

    The storage is a numpy ``uint8`` array of shape ``(rows, cols)``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize a grid with every cell dead.

        Args:
            rows: Number of rows (``m``)
            cols: Number of columns (``n``)

        Raises:
            InvalidDimensionsError: If either dimension is less than 1
        """
        if rows < 1 or cols < 1:
            raise InvalidDimensionsError(f"Invalid grid dimensions {rows}x{cols}: both must be at least 1")

        self.rows = rows
        self.cols = cols
        self._cells = np.zeros((rows, cols), dtype=np.uint8)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "Grid":
        """Create a grid from a rectangular 0/1 matrix.

        Args:
            matrix: Rows of 0/1 (or boolean) values

        Returns:
            New grid whose current generation matches the matrix

        Raises:
            InvalidDimensionsError: If the matrix is empty or ragged
            ValueError: If any value is not 0 or 1
        """
        rows = len(matrix)
        if rows == 0 or len(matrix[0]) == 0:
            raise InvalidDimensionsError("Seed matrix must have at least one row and one column")

        cols = len(matrix[0])
        for i, row in enumerate(matrix):
            if len(row) != cols:
                raise InvalidDimensionsError(f"Seed matrix row {i} has {len(row)} columns, expected {cols}")

        arr = np.asarray(matrix)
        if arr.dtype.kind not in "biuf" or not np.isin(arr, (0, 1)).all():
            raise ValueError("Seed matrix values must be 0 or 1")

        grid = cls(rows, cols)
        grid._cells[:] = arr.astype(np.uint8)
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the packed cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    def get_current(self, x: int, y: int) -> int:
        """Get the current-generation state of a cell.

        Args:
            x: Row coordinate, wrapped onto the grid
            y: Column coordinate, wrapped onto the grid

        Returns:
            1 if the cell is alive, 0 if dead
        """
        return int(self._cells[wrap(x, self.rows), wrap(y, self.cols)] & CURRENT_BIT)

    def set_next(self, x: int, y: int, value: int) -> None:
        """Stage a cell's next-generation state without touching bit 0.

        The staging bit must be clear before this call; staging the same
        cell twice in one generation would OR the values together.

        Args:
            x: Row coordinate, wrapped onto the grid
            y: Column coordinate, wrapped onto the grid
            value: 1 if the cell will be alive, 0 otherwise
        """
        self._cells[wrap(x, self.rows), wrap(y, self.cols)] |= value << 1

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the current state of a cell directly.

        Used to lay down seed patterns; clears any staged value.

        Args:
            x: Row coordinate, wrapped onto the grid
            y: Column coordinate, wrapped onto the grid
            alive: Whether the cell should be alive
        """
        self._cells[wrap(x, self.rows), wrap(y, self.cols)] = 1 if alive else 0

    def count_surround(self, x: int, y: int) -> int:
        """Count living Moore neighbors of a cell, wrapping at the edges.

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        return sum(self.get_current(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS)

    def promote(self) -> None:
        """Shift every cell right one bit, making the staged state current."""
        self._cells >>= 1

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Only bit 0 is read, so the result is meaningful outside the staging
        window as well as during it.

        Returns:
            Integer array of shape (rows, cols) with neighbor counts
        """
        current = torch.from_numpy((self._cells & CURRENT_BIT).astype(np.float32)).reshape(
            1, 1, self.rows, self.cols
        )
        padded = F.pad(current, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, _NEIGHBOR_KERNEL)
        return neighbors[0, 0].round().numpy().astype(np.int8)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells & CURRENT_BIT))

    def is_clean(self) -> bool:
        """Check that no cell has its staging bit set."""
        return not np.any(self._cells & STAGED_BIT)

    def living_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        coords = np.nonzero(self._cells & CURRENT_BIT)
        for x, y in zip(coords[0], coords[1]):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living_coords = np.nonzero(self._cells & CURRENT_BIT)
        if len(living_coords[0]) == 0:
            return None

        min_x, max_x = int(living_coords[0].min()), int(living_coords[0].max())
        min_y, max_y = int(living_coords[1].min()), int(living_coords[1].max())

        return (min_x, min_y, max_x, max_y)

    def to_list(self) -> list:
        """Convert the current generation to a nested 0/1 list."""
        return (self._cells & CURRENT_BIT).tolist()

    def copy(self) -> "Grid":
        """Create an independent copy of the grid."""
        other = Grid(self.rows, self.cols)
        other._cells[:] = self._cells
        return other

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same packed values."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join(
            "".join("*" if self._cells[x, y] & CURRENT_BIT else "." for y in range(self.cols))
            for x in range(self.rows)
        )


def make_grid(rows: int, cols: int) -> Grid:
    """Create a ``rows`` x ``cols`` grid with every cell dead."""
    return Grid(rows, cols)


def dimensions(grid: Grid) -> Tuple[int, int]:
    """Return ``(m, n)`` for a grid."""
    return grid.shape


def get_current(grid: Grid, x: int, y: int) -> int:
    """Return bit 0 of the cell at the wrapped coordinate."""
    return grid.get_current(x, y)


def set_next(grid: Grid, x: int, y: int, value: int) -> None:
    """Stage ``value`` into bit 1 of the cell at the wrapped coordinate."""
    grid.set_next(x, y, value)


def count_surround(grid: Grid, x: int, y: int) -> int:
    """Return the number of living Moore neighbors of ``(x, y)``."""
    return grid.count_surround(x, y)
