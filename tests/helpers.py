from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from jump61.components.side import Side
from jump61.systems.board import BoardSystem

Move = Tuple[Side, int, int]


def play(board: BoardSystem, moves: Iterable[Move]) -> None:
    """Apply (side, row, col) moves in order, asserting each one is legal."""

    for side, row, col in moves:
        assert board.is_legal(side, row, col), f"{side.value} may not play {row} {col}"
        board.add_spot(side, row, col)


def check_board(board, *expected: Sequence) -> None:
    """Assert board holds exactly the listed (row, col, spots, side) squares.

    Every square not listed must be neutral with a single spot.
    """

    listed = {}
    for row, col, spots, side in expected:
        square = board.get(row, col)
        assert (square.spots, square.side) == (spots, side), f"square {row} {col}: {square}"
        listed[(row, col)] = True
    for row in range(1, board.size + 1):
        for col in range(1, board.size + 1):
            if (row, col) in listed:
                continue
            square = board.get(row, col)
            assert square.side is Side.NEUTRAL and square.spots == 1, f"stray square {row} {col}: {square}"
