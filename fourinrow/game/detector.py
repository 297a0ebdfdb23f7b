"""
detector.py - Win and tie detection

WinDetector classifies a Board by matching its cells against the winning
line table. Nothing is cached; every call reads the current cells.
"""

from typing import Optional

import numpy as np

from fourinrow.debug import debug
from fourinrow.game.board import Board
from fourinrow.game.lines import WinningLine, WinningLineTable, get_winning_line_table
from fourinrow.utils import CELL_COUNT, MIN_PIECES_FOR_WIN, Player, WinState


class WinDetector:
    """Derives the WinState of a board."""

    def __init__(self, board: Board, lines: Optional[WinningLineTable] = None):
        self.board = board
        self.lines = lines if lines is not None else get_winning_line_table()

    def _matching_rows(self) -> np.ndarray:
        # One row of cell values per line; a line matches when its first cell
        # is occupied and all its cells equal the first.
        values = self.board.cells[self.lines.index_matrix]
        first = values[:, :1]
        return np.flatnonzero((first[:, 0] != Player.EMPTY.value) & (values == first).all(axis=1))

    def winning_line(self) -> Optional[WinningLine]:
        """The first completed line in table order, or None."""
        if self.board.pieces_played() < MIN_PIECES_FOR_WIN:
            return None
        matches = self._matching_rows()
        if matches.size == 0:
            return None
        return self.lines[int(matches[0])]

    def check_for_win(self) -> WinState:
        """
        Check the board for a winning line or a tie.

        Returns:
            NO_WINNER, PLAYER_ONE_WIN, PLAYER_TWO_WIN or TIE
        """
        pieces = self.board.pieces_played()
        if pieces < MIN_PIECES_FOR_WIN:
            return WinState.NO_WINNER

        debug.start_timer("win_check")
        line = self.winning_line()
        debug.end_timer("win_check", "detector")

        if line is not None:
            winner = self.board.cell_at(line.indices[0])
            debug.debug(f"Player {winner.value} has a {line.direction.name.lower()} line "
                        f"at {line.indices}", "detector")
            return WinState.for_player(winner)

        if pieces == CELL_COUNT:
            debug.debug("Board is full with no winning line", "detector")
            return WinState.TIE

        return WinState.NO_WINNER
