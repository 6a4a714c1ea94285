from __future__ import annotations

from typing import Sequence, Tuple

from esper import World

from jump61.components.board import Board
from jump61.components.history import BoardHistory, BoardSnapshot
from jump61.components.side import ALL_SIDES
from jump61.components.square import Square
from jump61.errors import InvalidPosition
from jump61.utils.topology import exists
from jump61.world import reset_board_entities

def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board entity not found")


def get_board(world: World) -> Board:
    return world.component_for_entity(get_board_entity(world), Board)


def get_history(world: World) -> BoardHistory:
    return world.component_for_entity(get_board_entity(world), BoardHistory)


def _cell_entity(world: World, board: Board, index: int) -> int:
    if not exists(index, board.size):
        raise InvalidPosition(f"no square #{index} on a {board.size}x{board.size} board")
    return board.cells[index]


def get_square(world: World, index: int) -> Square:
    board = get_board(world)
    return world.component_for_entity(_cell_entity(world, board, index), Square)


def all_squares(world: World) -> Tuple[Square, ...]:
    board = get_board(world)
    return tuple(world.component_for_entity(ent, Square) for ent in board.cells)


def put_square(world: World, index: int, square: Square) -> Square:
    """Replace the square at index, keeping ownership counts and the spot total exact.

    Returns the square that was replaced.
    """
    board = get_board(world)
    ent = _cell_entity(world, board, index)
    old: Square = world.component_for_entity(ent, Square)
    world.add_component(ent, square)
    board.transfer(old.side, square.side)
    board.total_spots += square.spots - old.spots
    return old


def take_snapshot(world: World) -> BoardSnapshot:
    board = get_board(world)
    return BoardSnapshot(
        size=board.size,
        squares=all_squares(world),
        counts=tuple(board.count_of(side) for side in ALL_SIDES),
        total_spots=board.total_spots,
    )


def restore_snapshot(world: World, snapshot: BoardSnapshot) -> None:
    """Put every square and counter back exactly as captured."""
    board = get_board(world)
    if board.size != snapshot.size:
        board = reset_board_entities(world, snapshot.size)
    for ent, square in zip(board.cells, snapshot.squares):
        world.add_component(ent, square)
    board.counts = dict(zip(ALL_SIDES, snapshot.counts))
    board.total_spots = snapshot.total_spots


def load_squares(world: World, size: int, squares: Sequence[Square]) -> None:
    """Adopt a full set of squares, recomputing counters from their contents."""
    board = get_board(world)
    if board.size != size:
        board = reset_board_entities(world, size)
    counts = {side: 0 for side in ALL_SIDES}
    total = 0
    for ent, square in zip(board.cells, squares):
        world.add_component(ent, square)
        counts[square.side] += 1
        total += square.spots
    board.counts = counts
    board.total_spots = total
