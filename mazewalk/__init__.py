"""Load text mazes and search them for the exit, depth-first or with threads."""

__version__ = "0.1.0"
__all__ = ["cli", "maze", "threaded"]