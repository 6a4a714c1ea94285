from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Set

from esper import World

from jump61.components.side import Side
from jump61.components.square import Square
from jump61.events.bus import EventBus
from jump61.systems.board_ops import get_board, get_square, put_square
from jump61.systems.rules import winner
from jump61.utils.topology import neighbor_count, neighbor_indices

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    """One overflowing square still handing out the spots it shed."""
    index: int
    side: Side
    pending: List[int]


@dataclass(slots=True)
class CascadeResult:
    steps: int = 0
    depth: int = 0
    positions: Set[int] = field(default_factory=set)
    halted_by_win: bool = False


class OverflowSystem:
    """Resolves overfull squares until the board settles.

    A square is overfull when it holds more spots than it has neighbors. It
    sheds exactly that many spots and hands one to each neighbor (left, right,
    up, down), claiming it for its own side. Propagation is depth-first: a
    neighbor pushed over the limit resolves before the remaining neighbors of
    its parent receive their spots. An explicit frame stack replaces recursion
    so long chains cannot exhaust the call stack.

    Once the board is won no new overflow starts, but frames already started
    still deliver every spot they shed, so the spot total never changes.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def is_overfull(self, index: int) -> bool:
        size = get_board(self.world).size
        return get_square(self.world, index).spots > neighbor_count(index, size)

    def resolve(self, index: int) -> CascadeResult:
        """Settle the board assuming only the square at index may be overfull."""
        result = CascadeResult()
        stack: List[_Frame] = []
        self._start(index, stack, result)
        while stack:
            frame = stack[-1]
            if not frame.pending:
                stack.pop()
                # A square set far above its limit may still be overfull after shedding once.
                self._start(frame.index, stack, result)
                continue
            target = frame.pending.pop(0)
            put_square(self.world, target, get_square(self.world, target).with_spot(frame.side))
            result.positions.add(target)
            self._start(target, stack, result)
        if result.steps:
            logger.debug(
                "cascade from #%d settled after %d overflows (max depth %d)",
                index, result.steps, result.depth,
            )
        return result

    def _start(self, index: int, stack: List[_Frame], result: CascadeResult) -> None:
        if not self.is_overfull(index):
            return
        board = get_board(self.world)
        if winner(board) is not None:
            result.halted_by_win = True
            return
        square = get_square(self.world, index)
        shed = neighbor_count(index, board.size)
        put_square(self.world, index, Square(square.side, square.spots - shed))
        stack.append(_Frame(index=index, side=square.side, pending=neighbor_indices(index, board.size)))
        result.steps += 1
        result.positions.add(index)
        result.depth = max(result.depth, len(stack))
