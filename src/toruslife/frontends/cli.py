"""Command-line interface for the toroidal Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional

from ..core.game import GameOfLife
from ..core.patterns import DEFAULT_SEED, Pattern
from .terminal import TerminalRenderer


class CLIGameOfLife:
    """Drives a simulation: advance, render, pause, repeat."""

    def __init__(
        self,
        renderer: TerminalRenderer,
        interval: float = 0.2,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the driver.

        Args:
            renderer: Renderer that draws each generation
            interval: Pause between generations in seconds
            sleep: Function used to pause (replaced in tests)
        """
        self.renderer = renderer
        self.interval = interval
        self._sleep = sleep

    def create_game(self, seed: Pattern = DEFAULT_SEED) -> GameOfLife:
        """Build a game from a seed pattern."""
        return GameOfLife(seed.to_grid())

    def run(
        self,
        game: GameOfLife,
        should_stop: Optional[Callable[[GameOfLife], bool]] = None,
        max_generations: Optional[int] = None,
    ) -> int:
        """Render the starting grid, then advance and render until stopped.

        With neither ``should_stop`` nor ``max_generations`` the loop only
        ends when the process is interrupted.

        Args:
            game: Game to drive
            should_stop: Called before each step; returning True ends the run
            max_generations: Maximum number of generations to advance

        Returns:
            Number of generations advanced
        """
        self.renderer.render(game.grid)

        advanced = 0
        while True:
            if max_generations is not None and advanced >= max_generations:
                break
            if should_stop is not None and should_stop(game):
                break

            game.step()
            advanced += 1
            self.renderer.render(game.grid)
            self._sleep(self.interval)

        return advanced


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a 10x10 torus in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run forever, one generation every 0.2 seconds (Ctrl-C to stop)
  toruslife

  # Faster redraw, stop after 40 generations
  toruslife --interval 0.05 --max-generations 40

  # Stop once the grid repeats an earlier state
  toruslife --stop-on-cycle --verbose

  # Plain output suitable for piping
  toruslife --no-clear -m 4 -i 0 --alive-char '#'
        """,
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=0.2,
        help="Pause between generations in seconds (default: 0.2)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument(
        "--stop-on-cycle",
        action="store_true",
        help="Stop when the grid returns to a state it has been in before",
    )

    # Output configuration
    parser.add_argument("--alive-char", type=str, default="o", help="Glyph for living cells (default: o)")

    parser.add_argument("--dead-char", type=str, default=".", help="Glyph for dead cells (default: .)")

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen before each frame",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print run information to stderr",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if len(args.alive_char) != 1:
        errors.append("Alive glyph must be a single character")

    if len(args.dead_char) != 1:
        errors.append("Dead glyph must be a single character")

    if args.alive_char == args.dead_char:
        errors.append("Alive and dead glyphs must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(generations: int, game: GameOfLife) -> None:
    """Print a run summary to stderr.

    Args:
        generations: Generations advanced during the run
        game: The finished game
    """
    stats = game.get_statistics()

    print(f"Advanced {generations} generations (generation {stats['generation']})", file=sys.stderr)
    print(
        f"Population: {stats['population']} ({stats['population_density']:.2%} of "
        f"{stats['grid_size'][0]}x{stats['grid_size'][1]})",
        file=sys.stderr,
    )
    print(f"Cells changing next generation: {stats['pending_changes']}", file=sys.stderr)
    if stats["cycle_detected"]:
        print(
            f"Cycle of length {stats['cycle_length']} starting at generation "
            f"{stats['cycle_start_generation']}",
            file=sys.stderr,
        )


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    renderer = TerminalRenderer(
        alive_char=args.alive_char,
        dead_char=args.dead_char,
        clear_screen=not args.no_clear,
    )
    cli = CLIGameOfLife(renderer, interval=args.interval)
    game = None

    try:
        game = cli.create_game()

        if args.verbose:
            rows, cols = game.grid.shape
            print(
                f"Running '{DEFAULT_SEED.name}' on a {rows}x{cols} torus, {args.interval}s per generation",
                file=sys.stderr,
            )

        should_stop = None
        if args.stop_on_cycle:
            should_stop = lambda g: g.cycle_detected  # noqa: E731

        advanced = cli.run(game, should_stop=should_stop, max_generations=args.max_generations)

        if args.verbose:
            print_results(advanced, game)

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        if args.verbose and game is not None:
            print_results(game.generation, game)
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
