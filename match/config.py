"""Match configuration: agent specs, per-match settings, and JSON suites."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

SEARCH_KINDS = ("minimax", "alphabeta", "random")


@dataclass
class AgentSpec:
    """Serializable description of one side's player."""

    kind: str = "alphabeta"  # minimax, alphabeta or random
    evaluation: str = "material_ratio"
    depth: int = 3
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in SEARCH_KINDS:
            raise ValueError(f"Unsupported search kind: {self.kind}")
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    @classmethod
    def parse(cls, text: str) -> "AgentSpec":
        """Parse ``kind[:evaluation[:depth]]``, e.g. ``alphabeta:material_space:4``."""
        parts = text.split(":")
        if not parts[0] or len(parts) > 3:
            raise ValueError(f"Agent spec should look like kind:evaluation:depth, got {text!r}")
        evaluation = parts[1] if len(parts) > 1 and parts[1] else "material_ratio"
        depth = int(parts[2]) if len(parts) > 2 else 3
        return cls(kind=parts[0], evaluation=evaluation, depth=depth)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "AgentSpec":
        seed = payload.get("seed")
        return cls(
            kind=str(payload.get("kind", "alphabeta")),
            evaluation=str(payload.get("evaluation", "material_ratio")),
            depth=int(payload.get("depth", 3)),
            seed=None if seed is None else int(seed),
        )

    def describe(self) -> str:
        if self.kind == "random":
            return "random"
        return f"{self.kind}({self.evaluation}, depth={self.depth})"


@dataclass
class MatchConfig:
    """Settings for a single game between two agents."""

    name: str = "match"
    width: int = 5
    height: int = 5
    draw_policy: str = "never"
    max_plies: int = 200
    player_one: AgentSpec = field(default_factory=AgentSpec)
    player_two: AgentSpec = field(default_factory=AgentSpec)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "MatchConfig":
        return cls(
            name=str(payload.get("name", "match")),
            width=int(payload.get("width", 5)),
            height=int(payload.get("height", 5)),
            draw_policy=str(payload.get("draw_policy", "never")),
            max_plies=int(payload.get("max_plies", 200)),
            player_one=AgentSpec.from_dict(payload.get("player_one", {})),
            player_two=AgentSpec.from_dict(payload.get("player_two", {})),
        )


@dataclass
class MatchSuite:
    """Ordered list of matches loaded from a JSON config file."""

    matches: List[MatchConfig] = field(default_factory=list)

    @classmethod
    def from_json(cls, path: str | Path) -> "MatchSuite":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        defaults = payload.get("defaults", {})
        matches = []
        for entry in payload.get("matches", []):
            merged = dict(defaults)
            merged.update(entry)
            matches.append(MatchConfig.from_dict(merged))
        return cls(matches=matches)
