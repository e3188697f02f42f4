"""Fanorona board topology, initial layout, and setup helpers."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

import numpy as np

from engine.errors import InvalidArgument, InvalidDimensions
from engine.pieces import CELL_SYMBOL, CELL_VALUES, EMPTY, Side
from engine.rules import Position, neighbors

LOGGER = logging.getLogger(__name__)

SUPPORTED_DIMENSIONS: FrozenSet[Tuple[int, int]] = frozenset({(3, 3), (5, 5), (9, 5)})


class Topology:
    """Read-only connection graph of a board, shared by every state of a match."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.positions: Tuple[Position, ...] = tuple(
            Position(x, y) for y in range(height) for x in range(width)
        )
        self._index: Dict[Position, int] = {pos: idx for idx, pos in enumerate(self.positions)}
        self.connections: Dict[Position, Tuple[Position, ...]] = {
            pos: tuple(sorted(neighbors(pos, width, height), key=self.index_of)) for pos in self.positions
        }
        self._distances: Optional[np.ndarray] = None

    def __contains__(self, pos: object) -> bool:
        return pos in self._index

    def __len__(self) -> int:
        return len(self.positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topology):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def index_of(self, pos: Position) -> int:
        """Row-major index of a position."""
        return pos[1] * self.width + pos[0]

    def connected(self, a: Position, b: Position) -> bool:
        return b in self.connections.get(a, ())

    def adjacency_matrix(self) -> np.ndarray:
        """Boolean matrix with ``[i, j]`` set when position i connects to position j."""
        size = len(self.positions)
        matrix = np.zeros((size, size), dtype=np.bool_)
        for pos, linked in self.connections.items():
            row = self._index[pos]
            for other in linked:
                matrix[row, self._index[other]] = True
        return matrix

    def distance_matrix(self) -> np.ndarray:
        """All-pairs shortest path lengths in steps; -1 where unreachable."""
        if self._distances is None:
            adjacency = self.adjacency_matrix().astype(np.int32)
            size = adjacency.shape[0]
            distances = np.full((size, size), -1, dtype=np.int32)
            np.fill_diagonal(distances, 0)
            reached = np.eye(size, dtype=np.bool_)
            frontier = reached.copy()
            for hops in range(1, size):
                frontier = ((frontier.astype(np.int32) @ adjacency) > 0) & ~reached
                if not frontier.any():
                    break
                distances[frontier] = hops
                reached |= frontier
            self._distances = distances
        return self._distances

    def distance(self, a: Position, b: Position) -> int:
        """Shortest number of steps from ``a`` to ``b`` along the board lines."""
        return int(self.distance_matrix()[self._index[a], self._index[b]])


def initial_values(width: int, height: int) -> Dict[Position, int]:
    """Opening layout: black fills the top band, white the bottom band.

    The middle row alternates black/white from the left, skipping the centre
    column, which stays empty.
    """
    mid_row = (height - (height // 2)) - 1
    mid_col = (width - (width // 2)) - 1
    values: Dict[Position, int] = {}
    for y in range(height):
        for x in range(width):
            if y < mid_row:
                values[Position(x, y)] = Side.BLACK.value
            elif y > mid_row:
                values[Position(x, y)] = Side.WHITE.value

    is_white = False
    for x in range(width):
        if x == mid_col:
            values[Position(x, mid_row)] = EMPTY
            continue
        values[Position(x, mid_row)] = Side.WHITE.value if is_white else Side.BLACK.value
        is_white = not is_white
    return values


class Board:
    """Fanorona board with its connection map and a mutable setup grid."""

    def __init__(self, width: int, height: int) -> None:
        if (width, height) not in SUPPORTED_DIMENSIONS:
            raise InvalidDimensions(
                f"Board dimensions should be 3x3, 5x5 or 9x5, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.topology = Topology(width, height)
        self.values: Dict[Position, int] = initial_values(width, height)
        LOGGER.debug("Built %dx%d board with %d intersections", width, height, len(self.topology))

    @property
    def connections(self) -> Mapping[Position, Tuple[Position, ...]]:
        return self.topology.connections

    def set_value(self, pos: Position, value: int) -> bool:
        """Set the cell value at ``pos``.

        Returns False when the position is not on the board.
        """
        if isinstance(value, bool) or value not in CELL_VALUES:
            raise InvalidArgument(f"Value should be 0, 1 or 2, got {value!r}")
        pos = Position(*pos)
        if pos not in self.values:
            return False
        self.values[pos] = int(value)
        return True

    def set_value_xy(self, x: int, y: int, value: int) -> bool:
        return self.set_value(Position(x, y), value)

    def clear(self) -> None:
        """Empty every cell; handy for composing test positions."""
        for pos in self.values:
            self.values[pos] = EMPTY

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        return render_cells(self.topology, self.values)

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"[{self.values[Position(x, y)]}]" for x in range(self.width))
            for y in range(self.height)
        )


def render_cells(topology: Topology, values: Mapping[Position, int]) -> str:
    lines: List[str] = []
    lines.append("   " + " ".join(f"{x:>2d}" for x in range(topology.width)))
    for y in range(topology.height):
        row = " ".join(f"{CELL_SYMBOL[values[Position(x, y)]]:>2s}" for x in range(topology.width))
        lines.append(f"{y:>2d} {row}")
    return "\n".join(lines)
