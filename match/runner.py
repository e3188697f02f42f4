"""Match driver: alternates two agents from an opening position to a result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

import numpy as np

from ai.alphabeta_ai import AlphaBetaSearch
from ai.base_ai import BaseSearch, Evaluation
from ai.evaluation import get_evaluation
from ai.minimax_ai import MinimaxSearch
from ai.random_ai import RandomSearch
from engine.board import Board
from engine.draw import DrawPolicy, NeverDraw, build_draw_policy
from engine.moves import Move
from engine.pieces import Side
from engine.state import GameState
from match.config import AgentSpec, MatchConfig, MatchSuite

LOGGER = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Final result of a match."""

    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveRecord:
    """One half-move played by an agent and the search effort behind it."""

    ply: int
    move: Move
    nodes_visited: int


@dataclass
class Agent:
    """A search strategy bound to an evaluation, a depth limit and a side."""

    search: BaseSearch
    evaluation: Evaluation
    depth_limit: int
    side: Side
    name: str = ""
    moves: List[MoveRecord] = field(default_factory=list)

    def play(self, state: GameState, ply: int = 0) -> GameState:
        """Search ``state`` and return the state after the chosen move."""
        play = self.search.search_and_select(state, self.evaluation, self.depth_limit, self.side.value)
        self.moves.append(MoveRecord(ply=ply, move=play.move, nodes_visited=play.nodes_visited))
        LOGGER.debug("Ply %d %s plays %s (%d nodes)", ply, self.name or self.side.name, play.move, play.nodes_visited)
        return play.state

    @property
    def total_nodes(self) -> int:
        return sum(record.nodes_visited for record in self.moves)


@dataclass
class MatchResult:
    """Summary of one finished match."""

    outcome: Outcome
    plies: int
    final_state: GameState
    player_one: Agent
    player_two: Agent
    reason: str = ""
    positions: List[np.ndarray] = field(default_factory=list)
    name: str = ""

    @property
    def winner(self) -> Optional[Side]:
        if self.outcome is Outcome.PLAYER_ONE_WINS:
            return Side.WHITE
        if self.outcome is Outcome.PLAYER_TWO_WINS:
            return Side.BLACK
        return None

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW


def _win_for(side: Side) -> Outcome:
    return Outcome.PLAYER_ONE_WINS if side is Side.WHITE else Outcome.PLAYER_TWO_WINS


def build_search(spec: AgentSpec, draw_policy: Optional[DrawPolicy] = None) -> BaseSearch:
    """Instantiate the search strategy named by ``spec``."""
    if spec.kind == "minimax":
        return MinimaxSearch(draw_policy=draw_policy)
    if spec.kind == "alphabeta":
        return AlphaBetaSearch(draw_policy=draw_policy)
    if spec.kind == "random":
        return RandomSearch(seed=spec.seed, draw_policy=draw_policy)
    raise ValueError(f"Unsupported search kind: {spec.kind}")


def build_agent(spec: AgentSpec, side: Side, draw_policy: Optional[DrawPolicy] = None) -> Agent:
    return Agent(
        search=build_search(spec, draw_policy),
        evaluation=get_evaluation(spec.evaluation),
        depth_limit=spec.depth,
        side=side,
        name=spec.describe(),
    )


def play_match(
    initial_state: GameState,
    player_one: Agent,
    player_two: Agent,
    draw_policy: Optional[DrawPolicy] = None,
    max_plies: int = 200,
    collect_positions: bool = False,
) -> MatchResult:
    """Alternate the agents until a side is eliminated, blocked, or the game is drawn.

    Terminal and draw checks run before every half-move, so they also cover
    the position each move produces. Reaching ``max_plies`` counts as a draw.
    """
    if player_one.side is not Side.WHITE or player_two.side is not Side.BLACK:
        raise ValueError("player_one must play WHITE and player_two BLACK")
    draw_policy = draw_policy or NeverDraw()
    agents: Dict[Side, Agent] = {Side.WHITE: player_one, Side.BLACK: player_two}

    state = initial_state
    positions: List[np.ndarray] = []
    plies = 0
    while True:
        if state.is_terminal():
            winner = state.winner()
            outcome = Outcome.DRAW if winner is None else _win_for(winner)
            reason = "elimination"
            break
        if draw_policy.is_draw(state):
            outcome, reason = Outcome.DRAW, f"draw policy {draw_policy.name}"
            break
        if plies >= max_plies:
            outcome, reason = Outcome.DRAW, "ply limit"
            break
        if not state.has_legal_moves():
            outcome, reason = _win_for(state.turn.opponent()), "blocked"
            break
        state = agents[state.turn].play(state, ply=plies)
        plies += 1
        if collect_positions:
            positions.append(state.encode_state())

    LOGGER.info(
        "Match finished: %s by %s after %d plies | nodes p1=%d p2=%d",
        outcome.value,
        reason,
        plies,
        player_one.total_nodes,
        player_two.total_nodes,
    )
    return MatchResult(
        outcome=outcome,
        plies=plies,
        final_state=state,
        player_one=player_one,
        player_two=player_two,
        reason=reason,
        positions=positions,
    )


class MatchRunner:
    """Plays configured matches and aggregates their results."""

    def __init__(self, collect_positions: bool = False) -> None:
        self.collect_positions = collect_positions

    def run_match(self, config: MatchConfig) -> MatchResult:
        board = Board(config.width, config.height)
        draw_policy = build_draw_policy(config.draw_policy)
        player_one = build_agent(config.player_one, Side.WHITE, draw_policy)
        player_two = build_agent(config.player_two, Side.BLACK, draw_policy)
        LOGGER.info(
            "Starting %s on %dx%d: %s vs %s",
            config.name,
            config.width,
            config.height,
            player_one.name,
            player_two.name,
        )
        result = play_match(
            GameState.from_board(board),
            player_one,
            player_two,
            draw_policy=draw_policy,
            max_plies=config.max_plies,
            collect_positions=self.collect_positions,
        )
        result.name = config.name
        return result

    def run_suite(self, suite: MatchSuite) -> List[MatchResult]:
        return [self.run_match(config) for config in suite.matches]

    @staticmethod
    def summarize(results: Sequence[MatchResult]) -> Dict[str, int]:
        summary = {
            "player_one_wins": 0,
            "player_two_wins": 0,
            "draws": 0,
            "player_one_nodes": 0,
            "player_two_nodes": 0,
        }
        for result in results:
            if result.outcome is Outcome.PLAYER_ONE_WINS:
                summary["player_one_wins"] += 1
            elif result.outcome is Outcome.PLAYER_TWO_WINS:
                summary["player_two_wins"] += 1
            else:
                summary["draws"] += 1
            summary["player_one_nodes"] += result.player_one.total_nodes
            summary["player_two_nodes"] += result.player_two.total_nodes
        return summary
