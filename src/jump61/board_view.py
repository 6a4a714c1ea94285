"""Frozen, read-only copies of a board for external consumers (AI search, displays)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from esper import World

from jump61.components.history import BoardSnapshot
from jump61.components.side import ALL_SIDES, PLAYER_SIDES, Side
from jump61.components.square import Square
from jump61.systems import rules
from jump61.systems.board_ops import take_snapshot
from jump61.utils import topology
from jump61.utils.board_text import display_squares, dump_squares, move_string


@dataclass(frozen=True, slots=True, eq=False)
class BoardView:
    """Inspection-only copy of a board.

    Shares nothing mutable with the board it was taken from: later moves on
    that board are not visible here. Two views (or a view and a live board)
    are equal when they have the same size and identical squares.
    """
    size: int
    squares: Tuple[Square, ...]
    counts: Tuple[int, int, int]
    total_spots: int

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> "BoardView":
        return cls(snapshot.size, snapshot.squares, snapshot.counts, snapshot.total_spots)

    @classmethod
    def from_world(cls, world: World) -> "BoardView":
        return cls.from_snapshot(take_snapshot(world))

    @property
    def num_squares(self) -> int:
        return self.size * self.size

    def count_of(self, side: Side) -> int:
        return self.counts[ALL_SIDES.index(side)]

    def get(self, row: int, col: int) -> Square:
        return self.squares[topology.square_index(row, col, self.size)]

    def get_at(self, index: int) -> Square:
        topology.row_of(index, self.size)
        return self.squares[index]

    def exists(self, row: int, col: int) -> bool:
        return topology.exists_rc(row, col, self.size)

    def exists_at(self, index: int) -> bool:
        return topology.exists(index, self.size)

    def row(self, index: int) -> int:
        return topology.row_of(index, self.size)

    def col(self, index: int) -> int:
        return topology.col_of(index, self.size)

    def square_index(self, row: int, col: int) -> int:
        return topology.square_index(row, col, self.size)

    def neighbors(self, index: int) -> int:
        return topology.neighbor_count(index, self.size)

    def neighbor_indices(self, index: int) -> List[int]:
        return topology.neighbor_indices(index, self.size)

    def whose_move(self) -> Side:
        return rules.whose_move(self)

    def winner(self) -> Side | None:
        return rules.winner(self)

    def is_legal_side(self, side: Side) -> bool:
        return rules.side_may_move(self, side)

    def is_legal(self, side: Side, row: int, col: int) -> bool:
        return rules.may_play_on(self, side, self.get(row, col))

    def is_legal_at(self, side: Side, index: int) -> bool:
        return rules.may_play_on(self, side, self.get_at(index))

    def legal_moves(self, side: Side) -> List[int]:
        """Square indices side may add a spot to right now."""
        if side not in PLAYER_SIDES or not self.is_legal_side(side):
            return []
        return [index for index, square in enumerate(self.squares) if square.side in (side, Side.NEUTRAL)]

    def move_string(self, index: int) -> str:
        return move_string(self.row(index), self.col(index))

    def to_display_string(self) -> str:
        return display_squares(self.size, self.squares)

    def __str__(self) -> str:
        return dump_squares(self.size, self.squares)

    def __eq__(self, other) -> bool:
        if isinstance(other, BoardView):
            return self.size == other.size and self.squares == other.squares
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.size, self.squares))
