from dataclasses import dataclass

from jump61.components.side import Side


@dataclass(frozen=True, slots=True)
class Square:
    """Contents of one cell: its owner and how many spots it holds.

    Squares are immutable; the board swaps in a new Square whenever a cell changes.
    """
    side: Side
    spots: int

    def __post_init__(self):
        if self.spots < 0:
            raise ValueError(f"spot count must be non-negative, got {self.spots}")

    def with_spot(self, side: Side) -> "Square":
        """Return this square plus one spot, claimed by side."""
        return Square(side, self.spots + 1)

    def __str__(self) -> str:
        return f"{self.spots}{self.side.glyph}"
