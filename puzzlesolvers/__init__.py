"""Solutions to classic programming-practice puzzles, grouped by theme, with a command-line runner."""

__version__ = "0.1.0"