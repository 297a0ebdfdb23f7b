"""
moves.py - Move validation and gravity-drop placement

MoveEngine is the only component that writes pieces to a Board. A move is
either applied completely (cell set, history appended, row returned) or
rejected with a MoveError before anything changes.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from fourinrow.debug import debug
from fourinrow.exceptions import ColumnFullError, GameOverError, InvalidColumnError
from fourinrow.game.board import Board
from fourinrow.game.detector import WinDetector
from fourinrow.utils import ROWS, COLS, Player, WinState, to_index


@dataclass(frozen=True)
class Move:
    """One placed piece. column and row are 1-indexed for reporting."""
    move_number: int
    player: Player
    column: int
    row: int


class MoveEngine:
    """Validates and applies moves on a Board."""

    def __init__(self, board: Board, detector: WinDetector):
        self.board = board
        self.detector = detector

    def validate(self, column) -> int:
        """
        Check the move preconditions in order and return the column as an int.

        Raises:
            GameOverError: the board already has a winner or is tied
            InvalidColumnError: column is not an integer in 0..COLS-1
            ColumnFullError: the column holds ROWS pieces
        """
        state = self.detector.check_for_win()
        if state != WinState.NO_WINNER:
            debug.debug(f"Rejected column {column}: game is over ({state.name})", "moves")
            raise GameOverError(f"Game is over ({state.name})", column)

        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            debug.debug(f"Rejected column {column!r}: not an integer", "moves")
            raise InvalidColumnError(f"Column must be an integer, got {column!r}", column)
        column = int(column)
        if not 0 <= column < COLS:
            debug.debug(f"Rejected column {column}: out of range", "moves")
            raise InvalidColumnError(f"Column {column} is outside 0..{COLS - 1}", column)

        if self.board.cell(ROWS - 1, column) != Player.EMPTY:
            debug.debug(f"Rejected column {column}: column is full", "moves")
            raise ColumnFullError(f"Column {column} is full", column)

        return column

    def landing_index(self, column: int) -> int:
        """
        Flat index where a piece dropped into column comes to rest.

        The piece goes one row above the highest occupied cell. Every cell
        below it must be occupied; otherwise something outside the engine
        left a gap in the column.
        """
        if not self.board.column_is_stacked(column):
            raise RuntimeError(f"Column {column} has a gap below its top piece")
        return to_index(self.board.column_height(column), column)

    def play_piece(self, column) -> int:
        """
        Drop the current player's piece into a 0-indexed column.

        Returns:
            The 1-indexed row where the piece landed
        """
        column = self.validate(column)

        player = self.board.current_turn_player()
        move_number = self.board.pieces_played() + 1
        index = self.landing_index(column)

        self.board.place(index, player)
        row = index // COLS + 1
        self.board.history.append(Move(move_number, player, column + 1, row))

        debug.debug(f"Move {move_number}: player {player.value} -> column {column + 1}, row {row}",
                    "moves")
        return row

    def valid_moves(self) -> List[int]:
        """0-indexed columns that can accept a piece, empty once the game is decided."""
        if self.detector.check_for_win().is_game_over():
            return []
        return [col for col in range(COLS)
                if self.board.cell(ROWS - 1, col) == Player.EMPTY]
