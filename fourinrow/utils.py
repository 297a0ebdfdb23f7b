"""
utils.py - Constants, enumerations and helpers shared across the engine

The board is stored as a flat sequence of CELL_COUNT cells. Row 0 is the
bottom row, so the cell at (row, col) lives at flat index row * COLS + col.
"""

from enum import Enum, auto
from typing import Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
CELL_COUNT = ROWS * COLS

# The first player needs CONNECT_N pieces, the second has CONNECT_N - 1 by then
MIN_PIECES_FOR_WIN = 2 * CONNECT_N - 1


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class WinState(Enum):
    """Classification of the board: ongoing, a player's win, or a tie."""
    NO_WINNER = 0
    PLAYER_ONE_WIN = 1
    PLAYER_TWO_WIN = 2
    TIE = 3

    def is_game_over(self) -> bool:
        """Check if the game is decided."""
        return self != WinState.NO_WINNER

    def winner(self) -> Player:
        """The winning player, or Player.EMPTY for no winner or a tie."""
        if self == WinState.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == WinState.PLAYER_TWO_WIN:
            return Player.TWO
        return Player.EMPTY

    @classmethod
    def for_player(cls, player: Player) -> 'WinState':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win state for {player!r}")


class Direction(Enum):
    """Enumeration representing directions of a winning line."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # "/" row and column increase together
    DIAGONAL_DOWN = auto()  # "\" row increases while column decreases


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1)
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if a (row, col) position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def to_index(row: int, col: int) -> int:
    """Flat index of a 0-indexed (row, col) position."""
    if not is_valid_position(row, col):
        raise IndexError(f"Position ({row}, {col}) is off the board")
    return row * COLS + col


def to_position(index: int) -> Tuple[int, int]:
    """0-indexed (row, col) of a flat index."""
    if not 0 <= index < CELL_COUNT:
        raise IndexError(f"Cell index {index} is outside [0, {CELL_COUNT})")
    return divmod(index, COLS)


def render_board_ascii(cells: np.ndarray) -> str:
    """
    Render a flat board as ASCII art, top row first.

    Args:
        cells: Flat array of CELL_COUNT cell values

    Returns:
        ASCII representation of the board with 1-indexed column labels
    """
    grid = np.asarray(cells).reshape(ROWS, COLS)
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]

    for row in range(ROWS - 1, -1, -1):
        result.append("|" + " ".join(str(Player(int(v))) for v in grid[row]) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(c + 1) for c in range(COLS)) + "|")

    return "\n".join(result)
