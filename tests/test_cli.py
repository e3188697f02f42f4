import numpy as np

from cli.main import run_cli


def test_cli_plays_single_match(tmp_path, capsys):
    target = tmp_path / "positions.npz"

    code = run_cli(
        [
            "--width", "3",
            "--height", "3",
            "--p1", "random",
            "--p2", "alphabeta:material_ratio:2",
            "--seed", "3",
            "--max-plies", "30",
            "--show-board",
            "--save-positions", str(target),
        ]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Player 1 [random] moves:" in out
    assert "Player 2 [alphabeta(material_ratio, depth=2)] moves:" in out
    assert "Player 2 states visited:" in out
    assert target.exists()
    with np.load(target) as saved:
        assert all(saved[key].shape[1:] == (3, 3, 3) for key in saved.files)


def test_cli_reports_bad_board_size(capsys):
    code = run_cli(["--width", "4", "--height", "4"])

    assert code == 2
