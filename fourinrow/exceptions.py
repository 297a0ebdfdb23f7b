"""
exceptions.py - Errors raised when a move is rejected

Every rejected move raises a MoveError subclass. They derive from ValueError
because each one describes a bad argument for the current board.
"""

from typing import Any


class MoveError(ValueError):
    """A move was rejected and the board was left unchanged."""

    def __init__(self, message: str, column: Any = None):
        super().__init__(message)
        self.column = column


class GameOverError(MoveError):
    """The game already has a winner or ended in a tie."""


class InvalidColumnError(MoveError):
    """The column is not an integer in 0..COLS-1."""


class ColumnFullError(MoveError):
    """The column already holds ROWS pieces."""
