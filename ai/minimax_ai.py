"""Brute-force depth-limited minimax search."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from ai.base_ai import BaseSearch, Evaluation, Play
from engine.moves import Move
from engine.pieces import Side
from engine.state import GameState

LOGGER = logging.getLogger(__name__)


class MinimaxSearch(BaseSearch):
    """Exhaustive minimax. Player 1 maximizes, player 2 minimizes."""

    name = "minimax"

    def search_and_select(
        self,
        state: GameState,
        evaluation: Optional[Evaluation],
        depth_limit: int,
        mover: int,
    ) -> Play:
        """Choose a move via full-width minimax to ``depth_limit``.

        Each root move's successor is searched with the full ``depth_limit``
        remaining, so a limit of 0 ranks root moves by a single evaluation.
        Ties keep the first move that reached the best value.
        """
        side = self._validate(state, evaluation, mover)
        successors = self._root_successors(state)
        maximizing = side is Side.WHITE

        nodes = 0
        best_value = -math.inf if maximizing else math.inf
        chosen: Optional[Move] = None
        diagnostics: List[Tuple[Move, int]] = []
        for move, child in successors.items():
            nodes += 1
            value, visited = self._minimax(child, evaluation, depth_limit, not maximizing)
            nodes += visited
            diagnostics.append((move, value))
            if (maximizing and value > best_value) or (not maximizing and value < best_value):
                best_value = value
                chosen = move

        self._log_diagnostics(diagnostics, chosen, maximizing)
        LOGGER.debug("Minimax selected %s with value %s after %d nodes", chosen, best_value, nodes)
        return Play(move=chosen, state=successors[chosen], nodes_visited=nodes)

    def _minimax(
        self,
        state: GameState,
        evaluation: Evaluation,
        remaining_depth: int,
        maximizing: bool,
    ) -> Tuple[int, int]:
        """Return (value, nodes visited below ``state``)."""
        leaf = self._leaf_value(state, evaluation, remaining_depth)
        if leaf is not None:
            return leaf, 0
        successors = state.successors()
        if not successors:
            return evaluation(state.cells, remaining_depth), 0

        nodes = 0
        best = -math.inf if maximizing else math.inf
        for child in successors.values():
            nodes += 1
            value, visited = self._minimax(child, evaluation, remaining_depth - 1, not maximizing)
            nodes += visited
            best = max(best, value) if maximizing else min(best, value)
        return best, nodes
