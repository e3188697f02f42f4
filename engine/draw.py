"""Draw detection policies.

A draw is a declared policy rather than a rule of the game, so the match
driver and the search engines take one as a parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Type

from engine.pieces import Side
from engine.state import GameState

LOGGER = logging.getLogger(__name__)


class DrawPolicy:
    """Decides whether a non-terminal state counts as drawn."""

    name = "base"

    def is_draw(self, state: GameState) -> bool:
        raise NotImplementedError


class NeverDraw(DrawPolicy):
    """Games only end by elimination."""

    name = "never"

    def is_draw(self, state: GameState) -> bool:
        return False


@dataclass
class MutualReachDraw(DrawPolicy):
    """Declare a draw when a thinned-out endgame has its pieces far apart.

    Applies only on boards with at least ``min_board_cells`` intersections,
    when both sides are down to exactly ``pieces_per_side`` pieces. The
    closest opposing pair must still be at least ``reach_threshold`` steps
    away, so touching pieces never draw.
    """

    pieces_per_side: int = 2
    min_board_cells: int = 10
    reach_threshold: int = 7

    name = "mutual_reach"

    def is_draw(self, state: GameState) -> bool:
        if len(state.topology) < self.min_board_cells:
            return False
        white = state.pieces(Side.WHITE)
        black = state.pieces(Side.BLACK)
        if len(white) != self.pieces_per_side or len(black) != self.pieces_per_side:
            return False

        reach = None
        for own in white:
            for other in black:
                steps = state.topology.distance(own, other)
                if steps >= 1 and (reach is None or steps < reach):
                    reach = steps
        if reach is None:
            return False
        drawn = reach >= self.reach_threshold
        if drawn:
            LOGGER.debug("Mutual reach draw: closest opposing pair is %d steps apart", reach)
        return drawn


DRAW_POLICIES: Dict[str, Type[DrawPolicy]] = {
    NeverDraw.name: NeverDraw,
    MutualReachDraw.name: MutualReachDraw,
}


def build_draw_policy(name: str) -> DrawPolicy:
    """Instantiate a draw policy by its registered name."""
    try:
        return DRAW_POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unsupported draw policy: {name}") from None
