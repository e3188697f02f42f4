"""Immutable Fanorona game state and legal successor generation."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

import numpy as np

from engine.board import Board, Topology, render_cells
from engine.errors import InvalidArgument
from engine.moves import Move, MoveKind
from engine.pieces import CELL_VALUES, EMPTY, Side
from engine.rules import Direction, Position, direction_of, opposite, step

WIN_PAYOFF = 100


@dataclass(frozen=True)
class GameState:
    """Board cells plus the side to move.

    States never change after construction; every move yields a new state
    that shares ``topology`` and owns a fresh copy of ``cells``.
    """

    topology: Topology
    cells: Mapping[Position, int]
    turn: Side

    def __post_init__(self) -> None:
        if not isinstance(self.turn, Side):
            raise InvalidArgument(f"turn must be a Side, got {self.turn!r}")
        cells = {Position(*pos): value for pos, value in self.cells.items()}
        if set(cells) != set(self.topology.positions):
            raise InvalidArgument("cells must cover exactly the board positions")
        bad = [value for value in cells.values() if value not in CELL_VALUES]
        if bad:
            raise InvalidArgument(f"cell values must be 0, 1 or 2, got {bad[0]!r}")
        object.__setattr__(self, "cells", MappingProxyType(cells))

    @classmethod
    def from_board(cls, board: Board, first: Side = Side.WHITE) -> "GameState":
        """Snapshot a board's current cells into a root state."""
        return cls(board.topology, dict(board.values), first)

    @classmethod
    def _from_trusted_cells(cls, topology: Topology, cells: Dict[Position, int], turn: Side) -> "GameState":
        """Wrap cells produced by a legal move without re-validating them."""
        state = object.__new__(cls)
        object.__setattr__(state, "topology", topology)
        object.__setattr__(state, "cells", MappingProxyType(cells))
        object.__setattr__(state, "turn", turn)
        return state

    def __hash__(self) -> int:
        return hash(self.key())

    def key(self) -> Tuple[int, Tuple[int, ...]]:
        """Hashable key capturing cell layout and turn."""
        return (self.turn.value, tuple(self.cells[pos] for pos in self.topology.positions))

    @property
    def opponent(self) -> Side:
        return self.turn.opponent()

    def pieces(self, side: Side) -> List[Position]:
        """Positions holding ``side``'s pieces, in row-major order."""
        return [pos for pos in self.topology.positions if self.cells[pos] == side.value]

    def piece_count(self, side: Side) -> int:
        return sum(1 for value in self.cells.values() if value == side.value)

    def total_pieces(self) -> int:
        return sum(1 for value in self.cells.values() if value != EMPTY)

    def is_terminal(self) -> bool:
        """A game is over once either side has no pieces left."""
        return self.piece_count(self.turn) == 0 or self.piece_count(self.opponent) == 0

    def winner(self) -> Optional[Side]:
        if not self.is_terminal():
            return None
        white = self.piece_count(Side.WHITE)
        black = self.piece_count(Side.BLACK)
        if white == black:
            return None
        return Side.WHITE if white > black else Side.BLACK

    def payoff(self, side: Side = Side.WHITE) -> int:
        """Outcome score from ``side``'s point of view, by piece count."""
        own = self.piece_count(side)
        other = self.piece_count(side.opponent())
        if own > other:
            return WIN_PAYOFF
        if own < other:
            return -WIN_PAYOFF
        return 0

    def legal_moves(self) -> List[Move]:
        """Generate legal moves for the side to move.

        Capturing moves are mandatory: when any approach or withdrawal move
        exists anywhere on the board, paika (non-capturing) moves are dropped.
        """
        captures: List[Move] = []
        quiet: List[Move] = []
        for start in self.pieces(self.turn):
            for end in self.topology.connections[start]:
                if self.cells[end] != EMPTY:
                    continue
                quiet.append(Move(start, end))
                direction = direction_of(start, end)
                approached = self._capture_line(end, direction)
                if approached:
                    captures.append(Move(start, end, MoveKind.APPROACH, approached))
                withdrawn = self._capture_line(start, opposite(direction))
                if withdrawn:
                    captures.append(Move(start, end, MoveKind.WITHDRAWAL, withdrawn))
        return captures if captures else quiet

    def _capture_line(self, origin: Position, direction: Direction) -> FrozenSet[Position]:
        """Collect the unbroken run of opponent pieces beyond ``origin``."""
        enemy = self.opponent.value
        captured = []
        pos = step(origin, direction)
        while pos in self.topology and self.cells[pos] == enemy:
            captured.append(pos)
            pos = step(pos, direction)
        return frozenset(captured)

    def successors(self) -> Dict[Move, "GameState"]:
        """Map every legal move to the state it produces."""
        return {move: self._play(move) for move in self.legal_moves()}

    def apply_move(self, move: Move) -> "GameState":
        """Apply a legal move and return the resulting state."""
        if move not in self.legal_moves():
            raise ValueError(f"Illegal move: {move}")
        return self._play(move)

    def _play(self, move: Move) -> "GameState":
        cells = dict(self.cells)
        cells[move.start] = EMPTY
        cells[move.end] = self.turn.value
        for pos in move.captured:
            cells[pos] = EMPTY
        return GameState._from_trusted_cells(self.topology, cells, self.opponent)

    def has_legal_moves(self) -> bool:
        return bool(self.legal_moves())

    def encode_state(self) -> np.ndarray:
        """Encode the state as float planes: side to move, white pieces, black pieces."""
        encoded = np.zeros((3, self.topology.height, self.topology.width), dtype=np.float32)
        encoded[0, :, :] = 1.0 if self.turn is Side.WHITE else 0.0
        for (x, y), value in self.cells.items():
            if value == Side.WHITE.value:
                encoded[1, y, x] = 1.0
            elif value == Side.BLACK.value:
                encoded[2, y, x] = 1.0
        return encoded

    def render_ascii(self) -> str:
        return render_cells(self.topology, self.cells)
