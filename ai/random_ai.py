"""Uniform random move selection, used as a weak baseline opponent."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ai.base_ai import BaseSearch, Evaluation, Play
from engine.draw import DrawPolicy
from engine.errors import InvalidArgument
from engine.pieces import side_from_id
from engine.state import GameState

LOGGER = logging.getLogger(__name__)


class RandomSearch(BaseSearch):
    """Pick any legal move with equal probability.

    The evaluation and depth limit are ignored. Pass ``rng`` (or ``seed``)
    to make choices reproducible.
    """

    name = "random"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        draw_policy: Optional[DrawPolicy] = None,
    ) -> None:
        super().__init__(draw_policy=draw_policy)
        self._rng = rng if rng is not None else random.Random(seed)

    def search_and_select(
        self,
        state: GameState,
        evaluation: Optional[Evaluation],
        depth_limit: int,
        mover: int,
    ) -> Play:
        if state is None:
            raise InvalidArgument("State can not be None")
        side_from_id(mover)
        successors = self._root_successors(state)
        move = self._rng.choice(list(successors))
        LOGGER.debug("Random search picked %s out of %d moves", move, len(successors))
        return Play(move=move, state=successors[move], nodes_visited=1)
