"""
fourinrow.game - Core game mechanics

This package contains the board representation, the winning line table,
move placement, win detection and the session that ties them together.
"""

from fourinrow.game.board import Board
from fourinrow.game.detector import WinDetector
from fourinrow.game.lines import WinningLine, WinningLineTable, get_winning_line_table
from fourinrow.game.moves import Move, MoveEngine
from fourinrow.game.rules import GameSession

__all__ = ['Board', 'WinDetector', 'WinningLine', 'WinningLineTable',
           'get_winning_line_table', 'Move', 'MoveEngine', 'GameSession']
