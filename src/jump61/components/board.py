from dataclasses import dataclass, field
from typing import Dict, List

from jump61.components.side import Side


@dataclass(slots=True)
class Board:
    """Aggregate state for the single board entity.

    cells: cell entity ids in row-major order (index -> entity).
    counts: number of squares owned by each side, neutral included.
    total_spots: spots on the whole board.
    """
    size: int
    cells: List[int] = field(default_factory=list)
    counts: Dict[Side, int] = field(default_factory=dict)
    total_spots: int = 0

    @property
    def num_squares(self) -> int:
        return self.size * self.size

    def count_of(self, side: Side) -> int:
        return self.counts.get(side, 0)

    def transfer(self, old: Side, new: Side):
        """Move one square of ownership from old to new."""
        if old is new:
            return
        self.counts[old] = self.counts.get(old, 0) - 1
        self.counts[new] = self.counts.get(new, 0) + 1
