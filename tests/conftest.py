import pytest

from fourinrow.game.rules import GameSession

# Player one completes row 0, columns 0-3, on move 7
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]
# Player one: (0,0) (1,1) (2,2) (3,3)
DIAGONAL_UP_WIN = [0, 1, 1, 2, 2, 3, 2, 3, 3, 5, 3]
# Player one: (0,6) (1,5) (2,4) (3,3)
DIAGONAL_DOWN_WIN = [6, 5, 5, 4, 4, 3, 4, 3, 3, 1, 3]

# Columns are filled in pairs: the first three rows alternate by column, the
# top three rows are flipped, and column 6 alternates by row. No line of four
# appears at any point.
_PAIR = [0, 1, 0, 1, 0, 1, 1, 0, 1, 0, 1, 0]
TIE_GAME = (_PAIR
            + [c + 2 for c in _PAIR]
            + [c + 4 for c in _PAIR]
            + [6] * 6)


@pytest.fixture
def session():
    return GameSession()


def play_all(session, columns):
    return [session.play_piece(c) for c in columns]
