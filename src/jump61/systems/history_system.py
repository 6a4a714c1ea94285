from __future__ import annotations

import logging

from esper import World

from jump61.components.history import BoardSnapshot
from jump61.errors import EmptyHistory
from jump61.events.bus import EVENT_CHECKPOINT_MARKED, EVENT_MOVE_UNDONE, EventBus
from jump61.systems.board_ops import get_history, restore_snapshot, take_snapshot

logger = logging.getLogger(__name__)


class HistorySystem:
    """Snapshot-based undo for the board entity.

    Every top-level move pushes a full copy of the pre-move state. Undo pops
    the latest copy and restores it verbatim; there is no redo.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    @property
    def depth(self) -> int:
        return len(get_history(self.world))

    def can_undo(self) -> bool:
        return self.depth > 0

    def record(self) -> BoardSnapshot:
        """Push the current state without announcing it (used before a move)."""
        snapshot = take_snapshot(self.world)
        get_history(self.world).push(snapshot)
        return snapshot

    def mark_checkpoint(self) -> BoardSnapshot:
        snapshot = self.record()
        logger.debug("checkpoint marked, %d snapshot(s) held", self.depth)
        self.event_bus.emit(EVENT_CHECKPOINT_MARKED, depth=self.depth)
        return snapshot

    def undo(self) -> BoardSnapshot:
        snapshot = get_history(self.world).pop()
        if snapshot is None:
            raise EmptyHistory("No history to undo")
        restore_snapshot(self.world, snapshot)
        logger.debug("undo restored snapshot, %d left", self.depth)
        self.event_bus.emit(EVENT_MOVE_UNDONE, depth=self.depth)
        return snapshot

    def clear(self):
        get_history(self.world).clear()
