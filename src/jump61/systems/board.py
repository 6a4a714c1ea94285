from __future__ import annotations

import logging
from typing import Callable, List, Optional

from esper import World

from jump61.board_view import BoardView
from jump61.components.board import Board
from jump61.components.side import Side
from jump61.components.square import Square
from jump61.constants import DEFAULT_BOARD_SIZE, INITIAL_SPOTS
from jump61.errors import GameError, InvalidSize
from jump61.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEARED,
    EVENT_CASCADE_COMPLETE,
    EVENT_GAME_WON,
    EVENT_SPOT_ADDED,
)
from jump61.systems import rules
from jump61.systems.board_ops import (
    all_squares,
    get_board,
    get_square,
    load_squares,
    put_square,
)
from jump61.systems.history_system import HistorySystem
from jump61.systems.overflow_system import CascadeResult, OverflowSystem
from jump61.utils import topology
from jump61.utils.board_text import display_squares, dump_squares, move_string
from jump61.world import create_world, reset_board_entities, validate_size

logger = logging.getLogger(__name__)

Notifier = Callable[[BoardView], None]


class BoardSystem:
    """Public face of a Jump61 board living in an ECS world.

    Squares are addressed either by 1-based row and column or by a 0-based
    row-major square number. Every mutating call runs any chain reaction to
    completion before it returns and then emits EVENT_BOARD_CHANGED exactly
    once with a frozen BoardView of the settled board.

    Turn order is not enforced by add_spot; callers ask is_legal first. A board
    that has been won ignores further moves.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.history = HistorySystem(world, event_bus)
        self.overflow = OverflowSystem(world, event_bus)
        self._notifier: Optional[Notifier] = None

    @classmethod
    def create(cls, size: int = DEFAULT_BOARD_SIZE, event_bus: EventBus | None = None) -> "BoardSystem":
        """Build a fresh world and bus holding an all-neutral board of the given size."""
        bus = event_bus or EventBus()
        return cls(create_world(bus, size), bus)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board:
        return get_board(self.world)

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def num_squares(self) -> int:
        return self.board.num_squares

    @property
    def total_spots(self) -> int:
        return self.board.total_spots

    def get(self, row: int, col: int) -> Square:
        return self.get_at(self.square_index(row, col))

    def get_at(self, index: int) -> Square:
        return get_square(self.world, index)

    def squares(self) -> List[Square]:
        return list(all_squares(self.world))

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

    def move_string(self, index: int) -> str:
        return move_string(self.row(index), self.col(index))

    def count_of(self, side: Side) -> int:
        return self.board.count_of(side)

    def whose_move(self) -> Side:
        return rules.whose_move(self.board)

    def winner(self) -> Side | None:
        return rules.winner(self.board)

    def is_legal_side(self, side: Side) -> bool:
        """True iff it is side's turn and the game is not over."""
        return rules.side_may_move(self.board, side)

    def is_legal(self, side: Side, row: int, col: int) -> bool:
        return self.is_legal_at(side, self.square_index(row, col))

    def is_legal_at(self, side: Side, index: int) -> bool:
        return rules.may_play_on(self.board, side, self.get_at(index))

    def readonly_view(self) -> BoardView:
        return BoardView.from_world(self.world)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def add_spot(self, side: Side, row: int, col: int) -> None:
        self.add_spot_at(side, self.square_index(row, col))

    def add_spot_at(self, side: Side, index: int) -> None:
        """Add one spot of side to square #index and settle any chain reaction.

        Assumes is_legal_at(side, index). Does nothing once the game is won.
        """
        square = self.get_at(index)
        if self.winner() is not None:
            return
        if not side.is_player:
            raise GameError("only RED or BLUE may add a spot")
        self.history.record()
        put_square(self.world, index, square.with_spot(side))
        result = self.overflow.resolve(index)
        self.event_bus.emit(
            EVENT_SPOT_ADDED, side=side, index=index, row=self.row(index), col=self.col(index)
        )
        self._finish_change(side, result, reason="add_spot")

    def set_square(self, row: int, col: int, spots: int, side: Side) -> None:
        self.set_square_at(self.square_index(row, col), spots, side)

    def set_square_at(self, index: int, spots: int, side: Side) -> None:
        """Overwrite square #index with spots of side, for setting up positions.

        Counters stay exact and an overfull result cascades, but turn order is
        ignored and no undo point is recorded; call mark_checkpoint first to
        make a batch of edits undoable. Does nothing once the game is won.
        """
        self.get_at(index)
        if spots <= 0:
            raise GameError(f"a square must hold at least one spot, got {spots}")
        if side is Side.NEUTRAL and spots > INITIAL_SPOTS:
            raise GameError(f"a neutral square holds at most {INITIAL_SPOTS} spot")
        if self.winner() is not None:
            return
        put_square(self.world, index, Square(side, spots))
        result = self.overflow.resolve(index)
        self._finish_change(side, result, reason="set_square")

    def _finish_change(self, side: Side, result: CascadeResult, *, reason: str) -> None:
        if result.steps:
            self.event_bus.emit(
                EVENT_CASCADE_COMPLETE,
                side=side,
                steps=result.steps,
                depth=result.depth,
                positions=sorted(result.positions),
            )
        won = self.winner()
        if won is not None:
            logger.info("%s wins on a %dx%d board", won.value, self.size, self.size)
            self.event_bus.emit(EVENT_GAME_WON, winner=won)
        self.announce(reason)

    # ------------------------------------------------------------------
    # History and resets
    # ------------------------------------------------------------------
    def undo(self) -> None:
        """Undo the latest move, back to the last clear or construction.

        Raises EmptyHistory when there is nothing to undo.
        """
        self.history.undo()
        self.announce("undo")

    def mark_checkpoint(self) -> None:
        """Record an undo point without making a move."""
        self.history.mark_checkpoint()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def clear(self, size: int) -> None:
        """Reset to an all-neutral board with size squares on a side; forget history."""
        validate_size(size)
        reset_board_entities(self.world, size)
        self.history.clear()
        logger.debug("board cleared to %dx%d", size, size)
        self.event_bus.emit(EVENT_BOARD_CLEARED, size=size)
        self.announce("clear")

    def copy_from(self, other: "BoardSystem | BoardView") -> None:
        """Adopt other's size and contents as a fresh starting point, forgetting history."""
        view = _as_view(other)
        load_squares(self.world, view.size, view.squares)
        self.history.clear()
        self.announce("copy")

    def internal_copy(self, other: "BoardSystem | BoardView") -> None:
        """Adopt the contents of a board of the same size, keeping history."""
        view = _as_view(other)
        if view.size != self.size:
            raise InvalidSize(f"cannot copy a {view.size}x{view.size} board into a {self.size}x{self.size} one")
        load_squares(self.world, view.size, view.squares)
        self.announce("internal_copy")

    def clone(self) -> "BoardSystem":
        """Independent board with the same contents, empty history and no notifier."""
        copy = BoardSystem.create(self.size)
        copy.copy_from(self)
        return copy

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------
    def set_notifier(self, notifier: Optional[Notifier]) -> None:
        """Register the single callback told about every settled change (None removes it)."""
        self._notifier = notifier

    def announce(self, reason: str) -> None:
        """Emit EVENT_BOARD_CHANGED on the bus, then call this board's notifier."""
        view = self.readonly_view()
        self.event_bus.emit(EVENT_BOARD_CHANGED, board=view, source=self, reason=reason)
        if self._notifier is not None:
            self._notifier(view)

    # ------------------------------------------------------------------
    # Rendering and comparison
    # ------------------------------------------------------------------
    def to_display_string(self) -> str:
        return display_squares(self.size, all_squares(self.world))

    def __str__(self) -> str:
        return dump_squares(self.size, all_squares(self.world))

    def __eq__(self, other) -> bool:
        if isinstance(other, (BoardSystem, BoardView)):
            return self.readonly_view() == _as_view(other)
        return NotImplemented

    __hash__ = None


def _as_view(board: "BoardSystem | BoardView") -> BoardView:
    if isinstance(board, BoardView):
        return board
    return board.readonly_view()
