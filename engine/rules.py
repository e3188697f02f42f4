"""Geometry helpers for the Fanorona board: positions and directions."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, NamedTuple, Tuple


class Position(NamedTuple):
    """One board intersection. (0, 0) is the top-left corner, y grows downward."""

    x: int
    y: int


class Direction(Enum):
    """Compass direction as a unit step (dx, dy)."""

    TOP = (0, -1)
    BOTTOM = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    TOP_LEFT = (-1, -1)
    TOP_RIGHT = (1, -1)
    BOTTOM_LEFT = (-1, 1)
    BOTTOM_RIGHT = (1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return opposite(self)


_OPPOSITE: Dict[Direction, Direction] = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP_LEFT: Direction.BOTTOM_RIGHT,
    Direction.BOTTOM_RIGHT: Direction.TOP_LEFT,
    Direction.TOP_RIGHT: Direction.BOTTOM_LEFT,
    Direction.BOTTOM_LEFT: Direction.TOP_RIGHT,
}

ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.BOTTOM,
    Direction.TOP,
)
DIAGONAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.TOP_LEFT,
    Direction.TOP_RIGHT,
    Direction.BOTTOM_LEFT,
    Direction.BOTTOM_RIGHT,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def direction_of(start: Position, end: Position) -> Direction:
    """Return the direction of travel from ``start`` to ``end``.

    Only the signs of the coordinate deltas matter, so any two distinct
    positions map to exactly one direction.
    """
    dx = _sign(end[0] - start[0])
    dy = _sign(end[1] - start[1])
    if dx == 0 and dy == 0:
        raise ValueError(f"No direction between identical positions {start}")
    return Direction((dx, dy))


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITE[direction]


def step(pos: Position, direction: Direction) -> Position:
    """Return the position one step away from ``pos`` in ``direction``."""
    return Position(pos[0] + direction.dx, pos[1] + direction.dy)


def in_bounds(pos: Position, width: int, height: int) -> bool:
    """Return whether a position is inside a ``width`` x ``height`` board."""
    x, y = pos
    return 0 <= x < width and 0 <= y < height


def has_diagonals(pos: Position) -> bool:
    """Diagonal lines pass through intersections whose coordinates share parity."""
    return pos[0] % 2 == pos[1] % 2


def neighbors(pos: Position, width: int, height: int) -> Iterable[Position]:
    """Yield in-bounds positions one step away along the board's lines."""
    directions = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS if has_diagonals(pos) else ORTHOGONAL_DIRECTIONS
    for direction in directions:
        candidate = step(pos, direction)
        if in_bounds(candidate, width, height):
            yield candidate
