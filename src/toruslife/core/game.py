"""Conway's Game of Life update engine."""

from typing import Deque, Dict
from collections import deque
import numpy as np

from .grid import Grid, CURRENT_BIT


def next_state(alive: int, neighbors: int) -> int:
    """Apply the Life rule to a single cell.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Args:
        alive: Current state of the cell (1 or 0)
        neighbors: Number of living neighbors

    Returns:
        1 if the cell is alive in the next generation, 0 otherwise
    """
    if alive:
        return 1 if neighbors in (2, 3) else 0
    return 1 if neighbors == 3 else 0


def advance(grid: Grid) -> None:
    """Advance a grid one generation in place.

    Every cell is staged before any is promoted, so each rule evaluation
    sees only current-generation neighbors.
    """
    rows, cols = grid.shape

    for x in range(rows):
        for y in range(cols):
            grid.set_next(x, y, next_state(grid.get_current(x, y), grid.count_surround(x, y)))

    grid.promote()


class GameOfLife:
    """Tracks a grid across generations.

    Keeps the generation counter, a bounded population history and
    cycle detection on top of :func:`advance`.
    """

    def __init__(self, grid: Grid, max_tracked_states: int = 1000) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to simulate
            max_tracked_states: Most recent states kept for cycle detection;
                cycles longer than this go undetected
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque(maxlen=max_tracked_states)
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._record_state()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        advance(self.grid)
        self._generation += 1
        self._record_state()

    def run(self, generations: int) -> None:
        """Advance the simulation a fixed number of generations."""
        for _ in range(generations):
            self.step()

    def _record_state(self) -> None:
        """Update population history and check for a repeated state."""
        self._population_history.append(self.population)

        if self._cycle_detected:
            return

        # The staging bit is clear between generations, so the packed bytes identify the state
        current_state = self.grid.cells.tobytes()

        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        # Forget the oldest state before the deque drops it
        if len(self._state_history) == self._state_history.maxlen:
            del self._seen_states[self._state_history[0]]

        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

    def pending_changes(self) -> int:
        """Count the cells whose state will flip on the next step.

        Zero means the grid has settled into a still life (or is empty).
        Reported in the run summary next to the cycle information.
        """
        neighbors = self.grid.count_all_neighbors()
        current = self.grid.cells & CURRENT_BIT

        survive = (current == 1) & ((neighbors == 2) | (neighbors == 3))
        born = (current == 0) & (neighbors == 3)
        upcoming = (survive | born).astype(np.uint8)

        return int(np.sum(upcoming != current))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        rows, cols = self.grid.shape
        bbox = self.grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "population_density": self.population / (rows * cols),
            "grid_size": (rows, cols),
            "bounding_box": bbox,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "pending_changes": self.pending_changes(),
        }

        return stats
