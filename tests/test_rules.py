import pytest

from engine.rules import Direction, Position, direction_of, opposite, step


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_fixed_point_free_involution(direction):
    assert opposite(opposite(direction)) is direction
    assert opposite(direction) is not direction
    assert direction.opposite() is opposite(direction)


def test_opposite_pairs():
    assert opposite(Direction.TOP) is Direction.BOTTOM
    assert opposite(Direction.LEFT) is Direction.RIGHT
    assert opposite(Direction.TOP_LEFT) is Direction.BOTTOM_RIGHT
    assert opposite(Direction.TOP_RIGHT) is Direction.BOTTOM_LEFT


@pytest.mark.parametrize(
    "end,expected",
    [
        ((2, 1), Direction.TOP),
        ((2, 3), Direction.BOTTOM),
        ((1, 2), Direction.LEFT),
        ((3, 2), Direction.RIGHT),
        ((1, 1), Direction.TOP_LEFT),
        ((3, 1), Direction.TOP_RIGHT),
        ((1, 3), Direction.BOTTOM_LEFT),
        ((3, 3), Direction.BOTTOM_RIGHT),
    ],
)
def test_direction_of_uses_coordinate_signs(end, expected):
    assert direction_of(Position(2, 2), Position(*end)) is expected


def test_step_moves_one_unit():
    assert step(Position(2, 2), Direction.TOP_RIGHT) == Position(3, 1)
    assert step(Position(0, 0), Direction.LEFT) == Position(-1, 0)


def test_direction_of_same_position_rejected():
    with pytest.raises(ValueError):
        direction_of(Position(1, 1), Position(1, 1))
