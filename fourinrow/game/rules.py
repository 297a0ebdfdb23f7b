"""
rules.py - Game session management for fourinrow

GameSession is the object callers hold on to. It composes the Board,
MoveEngine and WinDetector for the current game and keeps the consecutive
win streaks that survive from one game to the next.

A session is not thread-safe. Callers sharing one across threads must
serialize access to it.
"""

from typing import Optional, Tuple, Union

import numpy as np

from fourinrow.debug import debug
from fourinrow.game.board import Board
from fourinrow.game.detector import WinDetector
from fourinrow.game.lines import WinningLine, WinningLineTable, get_winning_line_table
from fourinrow.game.moves import Move, MoveEngine
from fourinrow.utils import Player, WinState


class GameSession:
    """
    High-level four-in-a-row game manager.

    Win streaks are bookkeeping only: record_win() trusts the caller to call
    it after check_for_win() reported that player's win.
    """

    def __init__(self, lines: Optional[WinningLineTable] = None):
        """Initialize a session with an empty board and zeroed streaks."""
        debug.debug("Initializing GameSession", "session")
        self._lines = lines if lines is not None else get_winning_line_table()
        self._player1_wins = 0
        self._player2_wins = 0
        self._new_board()

    def _new_board(self) -> None:
        self._board = Board()
        self._detector = WinDetector(self._board, self._lines)
        self._engine = MoveEngine(self._board, self._detector)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def player1_consecutive_wins(self) -> int:
        return self._player1_wins

    @property
    def player2_consecutive_wins(self) -> int:
        return self._player2_wins

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat view of the 42 cells for renderers."""
        return self._board.cells

    def play_piece(self, column: int) -> int:
        """
        Play the current player's piece in a 0-indexed column.

        Returns:
            The 1-indexed row where the piece landed

        Raises:
            GameOverError, InvalidColumnError, ColumnFullError
        """
        return self._engine.play_piece(column)

    def check_for_win(self) -> WinState:
        return self._detector.check_for_win()

    def winning_line(self) -> Optional[WinningLine]:
        return self._detector.winning_line()

    def current_turn_player(self) -> Player:
        return self._board.current_turn_player()

    def current_turn(self) -> int:
        """Number of pieces played so far."""
        return self._board.pieces_played()

    def move_history(self) -> Tuple[Move, ...]:
        """Moves of the current game in the order they were played."""
        return tuple(self._board.history)

    def valid_moves(self):
        return self._engine.valid_moves()

    def is_game_over(self) -> bool:
        return self.check_for_win().is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if there is no winner yet or a tie
        """
        winner = self.check_for_win().winner()
        return None if winner == Player.EMPTY else winner

    def reset_board(self) -> None:
        """Start a new game on a fresh board. Streaks are kept."""
        debug.debug("Resetting board for a new game", "session")
        self._new_board()

    def record_win(self, player: Union[Player, int]) -> None:
        """
        Credit a game win to player and break the other player's streak.

        Raises:
            ValueError: if player is not player one or two
        """
        player = _coerce_player(player)
        if player == Player.ONE:
            self._player1_wins += 1
            self._player2_wins = 0
        else:
            self._player2_wins += 1
            self._player1_wins = 0
        debug.info(f"Recorded win for player {player.value} "
                   f"(streaks {self._player1_wins}-{self._player2_wins})",
                   "session")

    def reset_consecutive_wins(self) -> None:
        debug.debug("Resetting consecutive wins", "session")
        self._player1_wins = 0
        self._player2_wins = 0

    def consecutive_wins(self, player: Union[Player, int]) -> int:
        player = _coerce_player(player)
        if player == Player.ONE:
            return self._player1_wins
        return self._player2_wins

    def render(self) -> str:
        return self._board.render()


def _coerce_player(player: Union[Player, int]) -> Player:
    if isinstance(player, Player):
        value = player
    elif isinstance(player, (int, np.integer)) and not isinstance(player, bool):
        try:
            value = Player(int(player))
        except ValueError:
            value = Player.EMPTY
    else:
        value = Player.EMPTY

    if value == Player.EMPTY:
        raise ValueError(f"Player must be 1 or 2, got {player!r}")
    return value
