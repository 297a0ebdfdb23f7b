import numpy as np
import pytest

from fourinrow.game.lines import WinningLineTable, get_winning_line_table
from fourinrow.utils import CELL_COUNT, COLS, Direction, DIRECTION_VECTORS


@pytest.fixture(scope="module")
def table():
    return get_winning_line_table()


def test_table_size(table):
    assert len(table) == 69
    counts = {d: sum(1 for line in table if line.direction == d) for d in Direction}
    assert counts == {
        Direction.HORIZONTAL: 24,
        Direction.VERTICAL: 21,
        Direction.DIAGONAL_UP: 12,
        Direction.DIAGONAL_DOWN: 12,
    }


def test_indices_in_bounds_and_distinct(table):
    for line in table:
        assert len(line.indices) == 4
        assert len(set(line.indices)) == 4
        assert all(0 <= i < CELL_COUNT for i in line.indices)


def test_no_duplicate_lines(table):
    as_sets = {frozenset(line.indices) for line in table}
    assert len(as_sets) == len(table)


def test_lines_are_straight_runs(table):
    for line in table:
        dr, dc = DIRECTION_VECTORS[line.direction]
        positions = [divmod(i, COLS) for i in line.indices]
        for (r0, c0), (r1, c1) in zip(positions, positions[1:]):
            assert (r1 - r0, c1 - c0) == (dr, dc)


def test_known_lines_present(table):
    indices = {line.indices for line in table}
    assert (0, 1, 2, 3) in indices          # bottom row, left
    assert (38, 39, 40, 41) in indices      # top row, right
    assert (6, 13, 20, 27) in indices       # right column, bottom
    assert (0, 8, 16, 24) in indices        # "/" from the bottom-left corner
    assert (6, 12, 18, 24) in indices       # "\" from the bottom-right corner
    assert (3, 9, 15, 21) in indices        # "\" ending at the left edge


def test_build_is_deterministic(table):
    rebuilt = WinningLineTable.build()
    assert rebuilt.lines == table.lines
    assert table.lines[0].direction == Direction.HORIZONTAL
    assert table.lines[-1].direction == Direction.DIAGONAL_DOWN


def test_shared_table_is_memoized():
    assert get_winning_line_table() is get_winning_line_table()


def test_index_matrix_is_read_only(table):
    matrix = table.index_matrix
    assert matrix.shape == (69, 4)
    assert np.array_equal(matrix[0], table[0].indices)
    with pytest.raises(ValueError):
        matrix[0, 0] = 5


def test_lines_through_corner_and_center(table):
    # Bottom-left corner: one horizontal, one vertical, one diagonal
    assert len(table.lines_through(0)) == 3
    # Cell (2, 3) is covered by the most lines on a 6x7 board
    assert len(table.lines_through_position(2, 3)) == 13


def test_smaller_grid():
    small = WinningLineTable.build(rows=4, cols=4, connect_n=4)
    assert len(small) == 10
