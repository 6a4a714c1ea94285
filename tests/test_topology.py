import pytest

from jump61.errors import GameError, InvalidPosition
from jump61.utils.topology import (
    SquareKind,
    classify,
    col_of,
    exists,
    exists_rc,
    neighbor_count,
    neighbor_indices,
    row_of,
    square_index,
)


def test_corner_neighbors_on_4x4():
    assert neighbor_indices(0, 4) == [1, 4]
    assert neighbor_indices(3, 4) == [2, 7]
    assert neighbor_indices(12, 4) == [13, 8]
    assert neighbor_indices(15, 4) == [14, 11]
    assert all(neighbor_count(i, 4) == 2 for i in (0, 3, 12, 15))


def test_edge_neighbors_listed_left_right_up_down():
    assert neighbor_indices(1, 4) == [0, 2, 5]
    assert neighbor_indices(14, 4) == [13, 15, 10]
    assert neighbor_indices(8, 4) == [9, 4, 12]
    assert neighbor_indices(7, 4) == [6, 3, 11]
    assert classify(8, 4) is SquareKind.EDGE


def test_interior_neighbors():
    assert neighbor_indices(5, 4) == [4, 6, 1, 9]
    assert neighbor_count(5, 4) == 4
    assert classify(10, 4) is SquareKind.INTERIOR


def test_two_by_two_is_all_corners():
    assert [classify(i, 2) for i in range(4)] == [SquareKind.CORNER] * 4


def test_neighbor_counts_cover_board():
    size = 6
    counts = [neighbor_count(i, size) for i in range(size * size)]
    assert counts.count(2) == 4
    assert counts.count(3) == 4 * (size - 2)
    assert counts.count(4) == (size - 2) ** 2


def test_row_col_round_trip_and_bounds():
    assert (row_of(13, 9), col_of(13, 9)) == (2, 5)
    assert square_index(2, 5, 9) == 13
    assert exists(80, 9) and not exists(81, 9) and not exists(-1, 9)
    assert exists_rc(9, 9, 9) and not exists_rc(0, 1, 9)


@pytest.mark.parametrize("row,col", [(0, 1), (1, 20), (1, -4), (23, 1)])
def test_out_of_range_coordinates_raise(row, col):
    with pytest.raises(InvalidPosition):
        square_index(row, col, 9)


def test_out_of_range_index_raises_game_error():
    with pytest.raises(GameError):
        neighbor_indices(16, 4)
