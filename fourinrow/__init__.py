"""
fourinrow - Rules engine for four-in-a-row on a 6x7 grid

This package tracks whose turn it is, validates and applies gravity-drop
moves, detects wins and ties, and keeps move history and win streaks.
Display, input and persistence are left to the calling application.
"""

from fourinrow.exceptions import (MoveError, GameOverError,
                                  InvalidColumnError, ColumnFullError)
from fourinrow.game import GameSession
from fourinrow.utils import Player, WinState

# Version number
__version__ = '0.1.0'

__all__ = ['GameSession', 'Player', 'WinState', 'MoveError', 'GameOverError',
           'InvalidColumnError', 'ColumnFullError']
