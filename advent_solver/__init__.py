"""Solvers for daily programming puzzles, days 1 to 15 and 18 to 20, with a command-line runner."""

__version__ = "0.1.0"