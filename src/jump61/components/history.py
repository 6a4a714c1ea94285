from dataclasses import dataclass, field
from typing import List, Tuple

from jump61.components.square import Square


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Full copy of a board's contents and counters at one point in time.

    counts holds (neutral, red, blue) square counts.
    """
    size: int
    squares: Tuple[Square, ...]
    counts: Tuple[int, int, int]
    total_spots: int


@dataclass(slots=True)
class BoardHistory:
    """Undo stack attached to the board entity, most recent snapshot last."""
    snapshots: List[BoardSnapshot] = field(default_factory=list)

    def push(self, snapshot: BoardSnapshot):
        self.snapshots.append(snapshot)

    def pop(self) -> BoardSnapshot | None:
        if not self.snapshots:
            return None
        return self.snapshots.pop()

    def clear(self):
        self.snapshots.clear()

    def __len__(self) -> int:
        return len(self.snapshots)
