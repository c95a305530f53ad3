"""
Exception hierarchy for the chain reaction engine.

Illegal moves are not exceptions: ``apply_move`` reports them by returning
``False``. The errors below signal integration bugs (bad coordinates) or a
broken engine (a cascade that never settles, an inconsistent cell).
"""

from __future__ import annotations

__all__ = [
    "ChainReactionError",
    "OutOfBounds",
    "InvariantViolation",
]


class ChainReactionError(Exception):
    """Base class for all engine errors."""


class OutOfBounds(ChainReactionError, IndexError):
    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} grid.")


class InvariantViolation(ChainReactionError, RuntimeError):
    """Internal state broke a board invariant. Not a gameplay outcome."""
