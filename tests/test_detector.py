import pytest

from conftest import (DIAGONAL_DOWN_WIN, DIAGONAL_UP_WIN, HORIZONTAL_WIN,
                      TIE_GAME, VERTICAL_WIN, play_all)
from fourinrow.game.board import Board
from fourinrow.game.detector import WinDetector
from fourinrow.game.lines import get_winning_line_table
from fourinrow.utils import Direction, Player, WinState, to_index


def test_horizontal_win_only_on_seventh_move(session):
    for column in HORIZONTAL_WIN[:-1]:
        session.play_piece(column)
        assert session.check_for_win() == WinState.NO_WINNER
    session.play_piece(HORIZONTAL_WIN[-1])
    assert session.check_for_win() == WinState.PLAYER_ONE_WIN
    assert session.winning_line().indices == (0, 1, 2, 3)
    assert session.winning_line().direction == Direction.HORIZONTAL


def test_vertical_win(session):
    play_all(session, VERTICAL_WIN)
    assert session.check_for_win() == WinState.PLAYER_ONE_WIN
    assert session.winning_line().indices == (0, 7, 14, 21)


def test_diagonal_up_win(session):
    rows = play_all(session, DIAGONAL_UP_WIN)
    assert rows[-1] == 4
    assert session.check_for_win() == WinState.PLAYER_ONE_WIN
    assert session.winning_line().direction == Direction.DIAGONAL_UP


def test_diagonal_down_win(session):
    play_all(session, DIAGONAL_DOWN_WIN[:-1])
    assert session.check_for_win() == WinState.NO_WINNER
    session.play_piece(DIAGONAL_DOWN_WIN[-1])
    assert session.check_for_win() == WinState.PLAYER_ONE_WIN
    assert session.winning_line().indices == (6, 12, 18, 24)


def test_player_two_win(session):
    # Player two fills row 0, columns 1-4, while player one scatters
    play_all(session, [0, 1, 0, 2, 6, 3, 6, 4])
    assert session.check_for_win() == WinState.PLAYER_TWO_WIN
    assert session.get_winner() == Player.TWO


def test_tie_exactly_at_full_board(session):
    for column in TIE_GAME[:-1]:
        session.play_piece(column)
        assert session.check_for_win() == WinState.NO_WINNER
    session.play_piece(TIE_GAME[-1])
    assert session.current_turn() == 42
    assert session.board.is_full()
    assert session.check_for_win() == WinState.TIE
    assert session.winning_line() is None
    assert session.get_winner() is None


def test_few_pieces_never_win():
    board = Board()
    for col in range(4):
        board.place(to_index(0, col), Player.ONE)
    # Four in a row but only four pieces: the short-circuit applies
    assert WinDetector(board).check_for_win() == WinState.NO_WINNER


def test_line_found_in_any_position():
    board = Board()
    for col in range(3, 7):
        board.place(to_index(0, col), Player.TWO)
    for col in range(3):
        board.place(to_index(0, col), Player.ONE)
    detector = WinDetector(board, get_winning_line_table())
    assert detector.check_for_win() == WinState.PLAYER_TWO_WIN
    assert detector.winning_line().indices == (3, 4, 5, 6)


@pytest.mark.parametrize("state,expected", [
    (WinState.NO_WINNER, False),
    (WinState.PLAYER_ONE_WIN, True),
    (WinState.PLAYER_TWO_WIN, True),
    (WinState.TIE, True),
])
def test_win_state_is_game_over(state, expected):
    assert state.is_game_over() is expected
