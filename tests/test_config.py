import json
from pathlib import Path

import pytest

from match.config import AgentSpec, MatchConfig, MatchSuite

DEMO_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "demo_matches.json"


def test_parse_agent_spec():
    spec = AgentSpec.parse("alphabeta:material_space:4")

    assert spec.kind == "alphabeta"
    assert spec.evaluation == "material_space"
    assert spec.depth == 4


def test_parse_agent_spec_defaults():
    spec = AgentSpec.parse("random")

    assert spec.kind == "random"
    assert spec.evaluation == "material_ratio"
    assert spec.depth == 3
    assert spec.describe() == "random"


@pytest.mark.parametrize("text", ["", "mcts:material_ratio:2", "minimax:material_ratio:-1", "a:b:1:2"])
def test_parse_agent_spec_rejects_bad_input(text):
    with pytest.raises(ValueError):
        AgentSpec.parse(text)


def test_suite_from_json_merges_defaults(tmp_path):
    payload = {
        "defaults": {"width": 9, "height": 5, "max_plies": 40},
        "matches": [
            {"name": "a", "player_one": {"kind": "minimax", "depth": 1}},
            {"name": "b", "width": 3, "height": 3, "player_two": {"kind": "random", "seed": 9}},
        ],
    }
    path = tmp_path / "suite.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    suite = MatchSuite.from_json(path)

    assert [config.name for config in suite.matches] == ["a", "b"]
    assert (suite.matches[0].width, suite.matches[0].height) == (9, 5)
    assert (suite.matches[1].width, suite.matches[1].height) == (3, 3)
    assert suite.matches[1].max_plies == 40
    assert suite.matches[0].player_one.depth == 1
    assert suite.matches[1].player_two.seed == 9


def test_demo_config_loads():
    suite = MatchSuite.from_json(DEMO_CONFIG)

    assert len(suite.matches) == 8
    assert all(isinstance(config, MatchConfig) for config in suite.matches)
    assert suite.matches[0].width == 3
