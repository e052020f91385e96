"""Text renderer that redraws the grid in place on a terminal."""

import sys
from typing import Optional, TextIO

from ..core.grid import Grid

# Cursor home, then erase the display
CLEAR_SCREEN = "\033[H\033[2J"


class TerminalRenderer:
    """Draws one frame per generation.

    Each frame is one line per row and one character per column, preceded
    by a clear-screen control sequence so frames overwrite each other.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        alive_char: str = "o",
        dead_char: str = ".",
        clear_screen: bool = True,
    ) -> None:
        """Initialize the renderer.

        Args:
            stream: Output stream (defaults to stdout)
            alive_char: Glyph for living cells
            dead_char: Glyph for dead cells
            clear_screen: Whether to emit the clear sequence before each frame
        """
        self.stream = stream if stream is not None else sys.stdout
        self.alive_char = alive_char
        self.dead_char = dead_char
        self.clear_screen = clear_screen

    def format_frame(self, grid: Grid) -> str:
        """Format the grid's current generation as text."""
        rows, cols = grid.shape
        lines = []
        for x in range(rows):
            lines.append(
                "".join(self.alive_char if grid.get_current(x, y) else self.dead_char for y in range(cols))
            )
        return "\n".join(lines)

    def render(self, grid: Grid) -> None:
        """Write a frame for the grid to the output stream."""
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(self.format_frame(grid) + "\n")
        self.stream.flush()
