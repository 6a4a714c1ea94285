from jump61.components.board import Board
from jump61.components.side import Side
from jump61.components.square import Square
from jump61.systems.rules import may_play_on, side_may_move, whose_move, winner


def _board(size, red=0, blue=0, total=None):
    counts = {Side.NEUTRAL: size * size - red - blue, Side.RED: red, Side.BLUE: blue}
    return Board(size=size, counts=counts, total_spots=size * size if total is None else total)


def test_turn_follows_spot_parity():
    assert whose_move(_board(6)) is Side.RED
    assert whose_move(_board(6, total=37)) is Side.BLUE
    assert whose_move(_board(5)) is Side.RED
    assert whose_move(_board(5, total=26)) is Side.BLUE
    assert whose_move(_board(5, total=27)) is Side.RED


def test_winner_requires_every_square():
    assert winner(_board(3, red=8, blue=1)) is None
    assert winner(_board(3, red=9)) is Side.RED
    assert winner(_board(3, blue=9)) is Side.BLUE


def test_nobody_moves_after_a_win():
    board = _board(2, blue=4, total=9)
    assert not side_may_move(board, Side.RED)
    assert not side_may_move(board, Side.BLUE)


def test_may_play_on_own_or_neutral_only():
    board = _board(4)
    assert may_play_on(board, Side.RED, Square(Side.NEUTRAL, 1))
    assert may_play_on(board, Side.RED, Square(Side.RED, 2))
    assert not may_play_on(board, Side.RED, Square(Side.BLUE, 2))
    assert not may_play_on(board, Side.BLUE, Square(Side.NEUTRAL, 1))
