"""CLI entrypoint for watching Fanorona search agents play each other."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

import numpy as np

from match.config import AgentSpec, MatchConfig, MatchSuite
from match.runner import MatchResult, MatchRunner

BANNER = "*" * 72


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Fanorona between two search agents.")
    parser.add_argument("--config", type=str, default=None, help="JSON match suite; overrides single-match flags")
    parser.add_argument("--width", type=int, default=5, help="Board width (3, 5 or 9)")
    parser.add_argument("--height", type=int, default=5, help="Board height (3 or 5)")
    parser.add_argument(
        "--p1",
        type=str,
        default="alphabeta:material_ratio:3",
        help="Player 1 (white) as kind:evaluation:depth",
    )
    parser.add_argument(
        "--p2",
        type=str,
        default="minimax:material_space:2",
        help="Player 2 (black) as kind:evaluation:depth",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random agents")
    parser.add_argument(
        "--draw-policy",
        type=str,
        default="never",
        choices=["never", "mutual_reach"],
        help="How drawn endgames are detected",
    )
    parser.add_argument("--max-plies", type=int, default=200, help="Half-moves before the game is called a draw")
    parser.add_argument("--show-board", action="store_true", help="Print the final board of each match")
    parser.add_argument("--save-positions", type=str, default=None, help="Write encoded positions to an .npz file")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_suite(args: argparse.Namespace) -> MatchSuite:
    if args.config:
        return MatchSuite.from_json(args.config)
    player_one = AgentSpec.parse(args.p1)
    player_two = AgentSpec.parse(args.p2)
    player_one.seed = args.seed
    player_two.seed = None if args.seed is None else args.seed + 1
    config = MatchConfig(
        name=f"{player_one.describe()} vs {player_two.describe()}",
        width=args.width,
        height=args.height,
        draw_policy=args.draw_policy,
        max_plies=args.max_plies,
        player_one=player_one,
        player_two=player_two,
    )
    return MatchSuite(matches=[config])


def format_result(result: MatchResult) -> str:
    lines: List[str] = [BANNER]
    if result.name:
        lines.append(result.name)
    if result.is_draw:
        lines.append(f"Game drawn ({result.reason}) after {result.plies} plies")
    else:
        lines.append(f"Player won: {result.winner.value} ({result.reason}) after {result.plies} plies")
    for label, agent in (("Player 1", result.player_one), ("Player 2", result.player_two)):
        lines.append(f"{label} [{agent.name}] moves: {len(agent.moves)}")
        lines.append(f"{label} states visited: {agent.total_nodes}")
    return "\n".join(lines)


def save_positions(path: str, results: Sequence[MatchResult]) -> None:
    arrays = {
        f"match_{idx}": np.stack(result.positions)
        for idx, result in enumerate(results)
        if result.positions
    }
    np.savez(path, **arrays)


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("fanorona.cli")

    runner = MatchRunner(collect_positions=args.save_positions is not None)
    try:
        results = runner.run_suite(build_suite(args))
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    for result in results:
        print(format_result(result))
        if args.show_board:
            print(result.final_state.render_ascii())
        print()

    if len(results) > 1:
        summary = runner.summarize(results)
        print(
            "Summary: P1 wins={player_one_wins} P2 wins={player_two_wins} draws={draws} "
            "P1 nodes={player_one_nodes} P2 nodes={player_two_nodes}".format(**summary)
        )
    if args.save_positions:
        save_positions(args.save_positions, results)
        logger.info("Saved encoded positions to %s", args.save_positions)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
