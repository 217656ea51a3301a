"""Solutions to small programming puzzles, grouped by difficulty, with a small command line entry point."""

__version__ = "0.1.0"