"""Falling-block puzzle game logic: pieces, grid, line clears and scoring."""

__version__ = "0.1.0"
__all__ = ["game", "grid", "piece", "shapes"]