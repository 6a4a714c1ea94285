import pytest

from jump61.components.board import Board
from jump61.components.board_position import BoardPosition
from jump61.components.history import BoardHistory
from jump61.components.side import Side
from jump61.components.square import Square
from jump61.errors import InvalidSize
from jump61.events.bus import EVENT_BOARD_CLEARED, EventBus
from jump61.world import create_world, reset_board_entities


def test_board_component_exists():
    bus = EventBus(); world = create_world(bus, size=5)
    boards = list(world.get_component(Board))
    assert boards, 'Board component missing'
    ent, comp = boards[0]
    assert comp.size == 5
    assert world.has_component(ent, BoardHistory)


def test_fresh_board_is_neutral_with_one_spot_each():
    world = create_world(EventBus(), size=6)
    board = list(world.get_component(Board))[0][1]
    assert len(board.cells) == 36
    assert board.count_of(Side.NEUTRAL) == 36
    assert board.count_of(Side.RED) == 0 and board.count_of(Side.BLUE) == 0
    assert board.total_spots == 36
    for index, ent in enumerate(board.cells):
        assert world.component_for_entity(ent, Square) == Square(Side.NEUTRAL, 1)
        pos = world.component_for_entity(ent, BoardPosition)
        assert (pos.index, pos.row, pos.col) == (index, index // 6 + 1, index % 6 + 1)


@pytest.mark.parametrize("size", [1, 0, -3])
def test_board_size_must_exceed_one(size):
    with pytest.raises(InvalidSize):
        create_world(EventBus(), size=size)


def test_reset_replaces_cell_entities():
    world = create_world(EventBus(), size=4)
    board = list(world.get_component(Board))[0][1]
    old_cells = list(board.cells)
    reset_board_entities(world, 3)
    assert board.size == 3 and len(board.cells) == 9
    assert len(list(world.get_component(Square))) == 9
    assert not any(world.entity_exists(ent) for ent in old_cells)


def test_transfer_moves_one_square_between_sides():
    board = Board(size=2, counts={Side.NEUTRAL: 4, Side.RED: 0, Side.BLUE: 0})
    board.transfer(Side.NEUTRAL, Side.RED)
    board.transfer(Side.RED, Side.RED)
    assert board.counts == {Side.NEUTRAL: 3, Side.RED: 1, Side.BLUE: 0}


def test_create_world_announces_fresh_board():
    bus = EventBus()
    cleared = []
    bus.subscribe(EVENT_BOARD_CLEARED, lambda s, **k: cleared.append(k["size"]))
    create_world(bus, size=3)
    create_world(size=4)
    assert cleared == [3]
