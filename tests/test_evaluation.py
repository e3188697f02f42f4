import pytest

from ai.evaluation import (
    EVALUATIONS,
    count_cells,
    get_evaluation,
    material_ratio,
    material_space,
    terminal_only,
)
from engine.board import Board
from engine.rules import Position


def test_opening_position_is_balanced():
    cells = Board(5, 5).values

    assert count_cells(cells) == (12, 12, 1)
    assert material_ratio(cells, 3) == 0
    assert material_space(cells, 3) == 4


def test_material_space_rewards_leader_with_open_board():
    board = Board(3, 3)
    board.set_value(Position(0, 0), 0)

    assert material_ratio(board.values, 1) == 11
    assert material_space(board.values, 1) == 33

    board.set_value(Position(0, 2), 0)
    board.set_value(Position(1, 2), 0)

    assert material_space(board.values, 1) == -56


def test_terminal_only_is_silent_at_cutoff():
    board = Board(3, 3)
    board.set_value(Position(0, 2), 0)

    assert terminal_only(board.values, 0) == 0
    assert terminal_only(board.values, 2) == -100
    board.set_value(Position(0, 0), 0)
    board.set_value(Position(1, 0), 0)
    assert terminal_only(board.values, 2) == 100


def test_registry_lookup():
    assert set(EVALUATIONS) == {"terminal_only", "material_ratio", "material_space"}
    assert get_evaluation("material_ratio") is material_ratio
    with pytest.raises(ValueError):
        get_evaluation("nonexistent")
