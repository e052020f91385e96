"""Frontend interfaces for the simulation."""

from .terminal import TerminalRenderer
from .cli import CLIGameOfLife

__all__ = ["TerminalRenderer", "CLIGameOfLife"]
