"""Base search strategy interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from engine.draw import DrawPolicy, NeverDraw
from engine.errors import InvalidArgument
from engine.moves import Move
from engine.pieces import Side, side_from_id
from engine.rules import Position
from engine.state import GameState

LOGGER = logging.getLogger(__name__)

# (cells, remaining_depth) -> score, higher is better for player 1.
Evaluation = Callable[[Mapping[Position, int], int], int]


@dataclass(frozen=True)
class Play:
    """Outcome of one search: the chosen move, the state it leads to, and the work done."""

    move: Move
    state: GameState
    nodes_visited: int


class BaseSearch(ABC):
    """Abstract search strategy contract.

    Strategies hold no per-game data; evaluation, depth limit and mover are
    supplied on every call.
    """

    name = "base"

    def __init__(self, draw_policy: Optional[DrawPolicy] = None, debug_top_k: int = 3) -> None:
        self.draw_policy = draw_policy or NeverDraw()
        self.debug_top_k = max(1, debug_top_k)

    @abstractmethod
    def search_and_select(
        self,
        state: GameState,
        evaluation: Optional[Evaluation],
        depth_limit: int,
        mover: int,
    ) -> Play:
        """Choose a move for ``mover`` from ``state``."""
        raise NotImplementedError

    def _validate(self, state: Optional[GameState], evaluation: Optional[Evaluation], mover: object) -> Side:
        if state is None or evaluation is None:
            raise InvalidArgument("State and Evaluation can not be None")
        return side_from_id(mover)

    def _log_diagnostics(self, diagnostics: List[Tuple[Move, int]], chosen: Move, maximizing: bool) -> None:
        """Emit top-k root candidates when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=maximizing)
        for idx, (move, value) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d move=%s value=%d chosen=%s", idx, move, value, move == chosen)

    def _root_successors(self, state: GameState) -> Dict[Move, GameState]:
        successors = state.successors()
        if not successors:
            raise RuntimeError("No legal moves available.")
        return successors

    def _leaf_value(self, state: GameState, evaluation: Evaluation, remaining_depth: int) -> Optional[int]:
        """Score a node that is not expanded, or None when it must be searched.

        Terminal states score their payoff, the depth cutoff defers to the
        evaluation, and drawn states score zero.
        """
        if state.is_terminal():
            return state.payoff(Side.WHITE)
        if remaining_depth <= 0:
            return evaluation(state.cells, remaining_depth)
        if self.draw_policy.is_draw(state):
            return 0
        return None
