"""
lines.py - Precomputed table of winning cell combinations

Every way to make CONNECT_N in a row on the grid is enumerated once and kept
in a WinningLineTable. The table depends only on grid geometry, so a single
shared instance is built lazily by get_winning_line_table() and handed to the
components that need it.
"""

from functools import lru_cache
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from fourinrow.debug import debug
from fourinrow.utils import (ROWS, COLS, CONNECT_N, Direction, DIRECTION_VECTORS,
                             to_index)


class WinningLine(NamedTuple):
    """Flat indices of one straight run, ordered from its starting cell."""
    indices: Tuple[int, ...]
    direction: Direction


class WinningLineTable:
    """
    Immutable collection of every winning line on a rows x cols grid.

    Lines are ordered by direction (horizontal, vertical, "/", "\\"), then by
    starting row and column, so the order is the same on every run.
    """

    def __init__(self, lines: Tuple[WinningLine, ...], rows: int = ROWS, cols: int = COLS):
        self._lines = tuple(lines)
        self.rows = rows
        self.cols = cols

        matrix = np.array([line.indices for line in self._lines], dtype=np.intp)
        matrix.setflags(write=False)
        self._matrix = matrix

    @classmethod
    def build(cls, rows: int = ROWS, cols: int = COLS,
              connect_n: int = CONNECT_N) -> 'WinningLineTable':
        """
        Enumerate every run of connect_n cells inside the grid.

        A run is kept only if both its first and last cells are on the board;
        the cells in between are then on the board as well.
        """
        lines = []
        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            for row in range(rows):
                for col in range(cols):
                    end_row = row + dr * (connect_n - 1)
                    end_col = col + dc * (connect_n - 1)
                    if not (0 <= end_row < rows and 0 <= end_col < cols):
                        continue
                    indices = tuple((row + dr * k) * cols + (col + dc * k)
                                    for k in range(connect_n))
                    lines.append(WinningLine(indices, direction))

        debug.debug(f"Built {len(lines)} winning lines for a {rows}x{cols} grid", "lines")
        return cls(tuple(lines), rows, cols)

    @property
    def lines(self) -> Tuple[WinningLine, ...]:
        return self._lines

    @property
    def index_matrix(self) -> np.ndarray:
        """Read-only (len(table), connect_n) array of flat indices."""
        return self._matrix

    def lines_through(self, index: int) -> Tuple[WinningLine, ...]:
        """All lines that include the given flat cell index."""
        return tuple(line for line in self._lines if index in line.indices)

    def lines_through_position(self, row: int, col: int) -> Tuple[WinningLine, ...]:
        return self.lines_through(to_index(row, col))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[WinningLine]:
        return iter(self._lines)

    def __getitem__(self, i: int) -> WinningLine:
        return self._lines[i]


@lru_cache(maxsize=None)
def get_winning_line_table() -> WinningLineTable:
    """The shared table for the standard grid, built on first use."""
    return WinningLineTable.build()
