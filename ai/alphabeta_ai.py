"""Minimax with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from ai.base_ai import BaseSearch, Evaluation, Play
from engine.moves import Move
from engine.pieces import Side
from engine.state import GameState

LOGGER = logging.getLogger(__name__)


class AlphaBetaSearch(BaseSearch):
    """Alpha-beta search.

    Picks the same move as :class:`ai.minimax_ai.MinimaxSearch` for the same
    inputs while skipping subtrees that cannot change the result. Children are
    visited in generation order, so the node count never exceeds minimax's.
    """

    name = "alphabeta"

    def search_and_select(
        self,
        state: GameState,
        evaluation: Optional[Evaluation],
        depth_limit: int,
        mover: int,
    ) -> Play:
        side = self._validate(state, evaluation, mover)
        successors = self._root_successors(state)
        maximizing = side is Side.WHITE

        nodes = 0
        alpha = -math.inf
        beta = math.inf
        chosen: Optional[Move] = None
        diagnostics: List[Tuple[Move, int]] = []
        for move, child in successors.items():
            nodes += 1
            if maximizing:
                value, visited = self._min_value(child, evaluation, depth_limit, alpha, beta)
                if value > alpha:
                    alpha = value
                    chosen = move
            else:
                value, visited = self._max_value(child, evaluation, depth_limit, alpha, beta)
                if value < beta:
                    beta = value
                    chosen = move
            nodes += visited
            diagnostics.append((move, value))

        self._log_diagnostics(diagnostics, chosen, maximizing)
        LOGGER.debug(
            "Alpha-beta selected %s with value %s after %d nodes",
            chosen,
            alpha if maximizing else beta,
            nodes,
        )
        return Play(move=chosen, state=successors[chosen], nodes_visited=nodes)

    def _max_value(
        self,
        state: GameState,
        evaluation: Evaluation,
        remaining_depth: int,
        alpha: float,
        beta: float,
    ) -> Tuple[int, int]:
        leaf = self._leaf_value(state, evaluation, remaining_depth)
        if leaf is not None:
            return leaf, 0
        successors = state.successors()
        if not successors:
            return evaluation(state.cells, remaining_depth), 0

        nodes = 0
        for child in successors.values():
            nodes += 1
            value, visited = self._min_value(child, evaluation, remaining_depth - 1, alpha, beta)
            nodes += visited
            alpha = max(alpha, value)
            if alpha >= beta:
                return beta, nodes
        return alpha, nodes

    def _min_value(
        self,
        state: GameState,
        evaluation: Evaluation,
        remaining_depth: int,
        alpha: float,
        beta: float,
    ) -> Tuple[int, int]:
        leaf = self._leaf_value(state, evaluation, remaining_depth)
        if leaf is not None:
            return leaf, 0
        successors = state.successors()
        if not successors:
            return evaluation(state.cells, remaining_depth), 0

        nodes = 0
        for child in successors.values():
            nodes += 1
            value, visited = self._max_value(child, evaluation, remaining_depth - 1, alpha, beta)
            nodes += visited
            beta = min(beta, value)
            if beta <= alpha:
                return alpha, nodes
        return beta, nodes
