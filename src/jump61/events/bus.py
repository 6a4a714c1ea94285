from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so lambdas and bound methods of unreferenced systems keep receiving.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# BOARD
# All board events fire only after a cascade has settled.
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"          # payload: board=BoardView, source=BoardSystem, reason=str
EVENT_SPOT_ADDED = "spot_added"                # payload: side=Side, index=int, row=int, col=int
EVENT_CASCADE_COMPLETE = "cascade_complete"    # payload: side=Side, steps=int, depth=int, positions=list[int]
EVENT_BOARD_CLEARED = "board_cleared"          # payload: size=int


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_WON = "game_won"                    # payload: winner=Side
EVENT_MOVE_UNDONE = "move_undone"              # payload: depth=int (snapshots left)
EVENT_CHECKPOINT_MARKED = "checkpoint_marked"  # payload: depth=int
