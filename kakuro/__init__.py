"""Kakuro grids, text/JSON/console loaders, a backtracking solver and a command line."""

__version__ = "0.1.0"
__all__ = ["cells", "grid", "loaders", "solver", "cli"]