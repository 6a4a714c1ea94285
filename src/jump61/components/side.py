from enum import Enum


class Side(Enum):
    """Owner of a square. NEUTRAL squares belong to nobody."""
    NEUTRAL = "neutral"
    RED = "red"
    BLUE = "blue"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def opposite(self) -> "Side":
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        return Side.NEUTRAL

    @property
    def is_player(self) -> bool:
        return self is not Side.NEUTRAL


_GLYPHS = {
    Side.NEUTRAL: "-",
    Side.RED: "r",
    Side.BLUE: "b",
}

PLAYER_SIDES = (Side.RED, Side.BLUE)
ALL_SIDES = (Side.NEUTRAL, Side.RED, Side.BLUE)
