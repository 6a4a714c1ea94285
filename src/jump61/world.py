from esper import World

from jump61.components.board import Board
from jump61.components.board_position import BoardPosition
from jump61.components.history import BoardHistory
from jump61.components.side import PLAYER_SIDES, Side
from jump61.components.square import Square
from jump61.constants import DEFAULT_BOARD_SIZE, INITIAL_SPOTS, MIN_BOARD_SIZE
from jump61.errors import InvalidSize
from jump61.events.bus import EVENT_BOARD_CLEARED, EventBus


def create_world(event_bus: EventBus | None = None, size: int = DEFAULT_BOARD_SIZE) -> World:
    """Build a world holding one board entity and size*size cell entities.

    When a bus is given it hears EVENT_BOARD_CLEARED for the fresh board.
    """
    validate_size(size)
    world = World()
    world.create_entity(Board(size=size), BoardHistory())
    reset_board_entities(world, size)
    if event_bus is not None:
        event_bus.emit(EVENT_BOARD_CLEARED, size=size)
    return world


def validate_size(size: int):
    if size < MIN_BOARD_SIZE:
        raise InvalidSize(f"board size must be greater than 1, got {size}")


def reset_board_entities(world: World, size: int) -> Board:
    """Replace all cell entities with a fresh all-neutral grid of the given size.

    History is left alone; callers decide whether it survives.
    """
    validate_size(size)
    board = None
    for _, comp in world.get_component(Board):
        board = comp
        break
    if board is None:
        world.create_entity(Board(size=size), BoardHistory())
        board = list(world.get_component(Board))[0][1]
    for ent in board.cells:
        world.delete_entity(ent, immediate=True)
    board.size = size
    board.cells = []
    for index in range(size * size):
        ent = world.create_entity(
            BoardPosition(index=index, row=index // size + 1, col=index % size + 1),
            Square(Side.NEUTRAL, INITIAL_SPOTS),
        )
        board.cells.append(ent)
    board.counts = {Side.NEUTRAL: size * size}
    for side in PLAYER_SIDES:
        board.counts[side] = 0
    board.total_spots = INITIAL_SPOTS * size * size
    return board
