from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Location of a cell entity.

    index: row-major square number, 0-based.
    row/col: 1-based coordinates.
    """
    index: int
    row: int
    col: int
