"""Text renderings of a board: the fixed dump format and the numbered display."""
from __future__ import annotations

from typing import Sequence

from jump61.components.square import Square
from jump61.constants import DUMP_DELIMITER, DUMP_ROW_INDENT


def dump_squares(size: int, squares: Sequence[Square]) -> str:
    """Render squares in the dump format used by logs and tests.

    ===
        2r 1- 1-
        1- 3b 1-
        1- 1- 1-
    ===
    """
    lines = [DUMP_DELIMITER]
    for start in range(0, size * size, size):
        row = squares[start:start + size]
        lines.append(DUMP_ROW_INDENT + "".join(f" {square}" for square in row))
    lines.append(DUMP_DELIMITER)
    return "\n".join(lines)


def display_squares(size: int, squares: Sequence[Square]) -> str:
    """Dump rows prefixed with row numbers and followed by a column ruler."""
    rows = dump_squares(size, squares).split("\n")[1:-1]
    out = [f"{number:2d} {line.strip()}\n" for number, line in enumerate(rows, start=1)]
    out.append("  " + "".join(f"{col:3d}" for col in range(1, size + 1)))
    return "".join(out)


def move_string(row: int, col: int) -> str:
    return f"{row} {col}"
