"""
board.py - Board representation for the fourinrow engine

The Board holds the 42 cells of the grid as a flat numpy array together with
the move history of the current game. Turn and piece count are always derived
from the cells rather than stored.
"""

from typing import List, TYPE_CHECKING

import numpy as np

from fourinrow.debug import debug
from fourinrow.utils import (ROWS, COLS, CELL_COUNT, Player,
                             render_board_ascii, to_index)

if TYPE_CHECKING:
    from fourinrow.game.moves import Move


class Board:
    """
    Represents the game grid.

    Cell (row, col) is stored at flat index row * COLS + col with row 0 at the
    bottom. Only the MoveEngine places pieces; everything else reads.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset every cell to empty and clear the move history."""
        debug.debug("Resetting board", "board")
        self._cells = np.zeros(CELL_COUNT, dtype=np.int8)
        self.history: List['Move'] = []

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same cells and history
        """
        new_board = Board()
        new_board._cells = self._cells.copy()
        new_board.history = list(self.history)
        return new_board

    def cell_at(self, index: int) -> Player:
        """
        Get the cell value at a flat index.

        Raises:
            IndexError: if index is not an integer in [0, 42)
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise IndexError(f"Cell index must be an integer, got {index!r}")
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index {index} is outside [0, {CELL_COUNT})")
        return Player(int(self._cells[index]))

    def cell(self, row: int, col: int) -> Player:
        """Get the cell value at a 0-indexed (row, col)."""
        return self.cell_at(to_index(row, col))

    def pieces_played(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self._cells))

    def current_turn_player(self) -> Player:
        """Player ONE moves on an even piece count, player TWO on an odd one."""
        return Player.ONE if self.pieces_played() % 2 == 0 else Player.TWO

    def column_height(self, col: int) -> int:
        """Number of pieces in a column, counting from the bottom."""
        column = self._cells[col::COLS]
        occupied = np.flatnonzero(column)
        return int(occupied[-1]) + 1 if occupied.size else 0

    def is_full(self) -> bool:
        return self.pieces_played() == CELL_COUNT

    def column_is_stacked(self, col: int) -> bool:
        """True when the column's pieces form one run starting at row 0."""
        return int(np.count_nonzero(self._cells[col::COLS])) == self.column_height(col)

    def is_stacked(self) -> bool:
        """Check the gravity invariant for every column (no floating pieces)."""
        return all(self.column_is_stacked(col) for col in range(COLS))

    def place(self, index: int, player: Player) -> None:
        """Set a single empty cell. Used by the MoveEngine."""
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")
        if self.cell_at(index) != Player.EMPTY:
            raise ValueError(f"Cell {index} is already occupied")
        debug.trace(f"Setting cell {index} to player {player.value}", "board")
        self._cells[index] = player.value

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat view of the 42 cells, row-major from the bottom."""
        view = self._cells.view()
        view.setflags(write=False)
        return view

    def get_state(self) -> np.ndarray:
        """
        Get the board as a 2D array.

        Returns:
            Copy of shape (ROWS, COLS) where index [0] is the bottom row
        """
        return self._cells.reshape(ROWS, COLS).copy()

    def render(self) -> str:
        """Render the board as a string, top row first."""
        return render_board_ascii(self._cells)

    def __str__(self) -> str:
        return self.render()
