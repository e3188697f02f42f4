import pytest

from engine.board import Board
from engine.draw import MutualReachDraw, NeverDraw, build_draw_policy
from engine.pieces import Side
from engine.rules import Position
from engine.state import GameState


def build_state(width, height, white, black) -> GameState:
    board = Board(width, height)
    board.clear()
    for x, y in white:
        board.set_value(Position(x, y), Side.WHITE.value)
    for x, y in black:
        board.set_value(Position(x, y), Side.BLACK.value)
    return GameState.from_board(board)


def test_never_draw():
    state = build_state(9, 5, white=[(0, 0), (0, 4)], black=[(8, 0), (8, 4)])

    assert NeverDraw().is_draw(state) is False


def test_far_apart_endgame_is_drawn():
    state = build_state(9, 5, white=[(0, 0), (0, 4)], black=[(8, 0), (8, 4)])

    assert MutualReachDraw().is_draw(state) is True


def test_close_pieces_are_not_drawn():
    state = build_state(9, 5, white=[(0, 0), (0, 4)], black=[(2, 0), (8, 4)])

    assert MutualReachDraw().is_draw(state) is False


def test_adjacent_opposing_pieces_are_not_drawn():
    # Every other opposing pair is 7 steps apart.
    state = build_state(9, 5, white=[(0, 0), (8, 4)], black=[(1, 0), (7, 4)])

    assert state.topology.distance(Position(0, 0), Position(7, 4)) == 7
    assert state.topology.distance(Position(8, 4), Position(1, 0)) == 7
    assert MutualReachDraw().is_draw(state) is False


def test_piece_counts_must_match_threshold():
    state = build_state(9, 5, white=[(0, 0), (0, 4), (0, 2)], black=[(8, 0), (8, 4)])

    assert MutualReachDraw().is_draw(state) is False
    assert MutualReachDraw(pieces_per_side=3).is_draw(state) is False
    state = build_state(9, 5, white=[(0, 0), (0, 4), (0, 2)], black=[(8, 0), (8, 4), (8, 2)])
    assert MutualReachDraw(pieces_per_side=3).is_draw(state) is True


def test_small_board_never_draws():
    state = build_state(3, 3, white=[(0, 0), (0, 2)], black=[(2, 0), (2, 2)])

    assert MutualReachDraw().is_draw(state) is False
    assert MutualReachDraw(min_board_cells=9, reach_threshold=2).is_draw(state) is True


def test_build_draw_policy_by_name():
    assert isinstance(build_draw_policy("never"), NeverDraw)
    assert isinstance(build_draw_policy("mutual_reach"), MutualReachDraw)
    with pytest.raises(ValueError):
        build_draw_policy("sometimes")
