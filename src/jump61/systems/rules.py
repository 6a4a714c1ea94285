"""Turn order, winner and legality. Everything here is derived from board counters."""
from __future__ import annotations

from typing import Protocol

from jump61.components.side import PLAYER_SIDES, Side
from jump61.components.square import Square


class BoardCounters(Protocol):
    size: int
    total_spots: int

    @property
    def num_squares(self) -> int: ...

    def count_of(self, side: Side) -> int: ...


def whose_move(board: BoardCounters) -> Side:
    """Side to move next. Once the game is won this is the loser."""
    return Side.RED if (board.total_spots + board.size) % 2 == 0 else Side.BLUE


def winner(board: BoardCounters) -> Side | None:
    for side in PLAYER_SIDES:
        if board.count_of(side) == board.num_squares:
            return side
    return None


def side_may_move(board: BoardCounters, side: Side) -> bool:
    return whose_move(board) is side and winner(board) is None


def may_play_on(board: BoardCounters, side: Side, square: Square) -> bool:
    return side_may_move(board, side) and square.side in (side, Side.NEUTRAL)
