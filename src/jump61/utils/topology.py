"""Pure positional helpers for an N x N board.

Squares are numbered in row-major order starting at 0; rows and columns are
1-based. Neighbors are orthogonal only and always listed left, right, up, down,
skipping any side that would leave the grid.
"""
from __future__ import annotations

from enum import Enum
from typing import List

from jump61.errors import InvalidInternalState, InvalidPosition


class SquareKind(Enum):
    CORNER = 2
    EDGE = 3
    INTERIOR = 4


def exists(index: int, size: int) -> bool:
    return 0 <= index < size * size


def exists_rc(row: int, col: int, size: int) -> bool:
    return 1 <= row <= size and 1 <= col <= size


def row_of(index: int, size: int) -> int:
    if not exists(index, size):
        raise InvalidPosition(f"no square #{index} on a {size}x{size} board")
    return index // size + 1


def col_of(index: int, size: int) -> int:
    if not exists(index, size):
        raise InvalidPosition(f"no square #{index} on a {size}x{size} board")
    return index % size + 1


def square_index(row: int, col: int, size: int) -> int:
    if not exists_rc(row, col, size):
        raise InvalidPosition(f"no square at row {row}, column {col} on a {size}x{size} board")
    return (row - 1) * size + (col - 1)


def neighbor_count(index: int, size: int) -> int:
    row = row_of(index, size)
    col = col_of(index, size)
    n = 0
    if col > 1:
        n += 1
    if col < size:
        n += 1
    if row > 1:
        n += 1
    if row < size:
        n += 1
    return n


def classify(index: int, size: int) -> SquareKind:
    count = neighbor_count(index, size)
    try:
        return SquareKind(count)
    except ValueError:
        raise InvalidInternalState(f"square #{index} has {count} neighbors") from None


def neighbor_indices(index: int, size: int) -> List[int]:
    row = row_of(index, size)
    col = col_of(index, size)
    neighbors: List[int] = []
    if col > 1:
        neighbors.append(index - 1)
    if col < size:
        neighbors.append(index + 1)
    if row > 1:
        neighbors.append(index - size)
    if row < size:
        neighbors.append(index + size)
    expected = classify(index, size).value
    if len(neighbors) != expected:
        raise InvalidInternalState(
            f"square #{index} lists {len(neighbors)} neighbors, expected {expected}"
        )
    return neighbors
