"""Tests pour scripts/play_sequence.py."""

import json

import pytest

from scripts.play_sequence import format_grid, main


def test_replay_output(tmp_path, capsys):
    """La graine et les coups donnés sont rejoués à l'identique."""
    output = tmp_path / "out" / "replay.json"
    code = main([
        "--seed", "1234",
        "--moves", "ULDRULDRUL",
        "--no-record",
        "--output", str(output),
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "seed=1234" in out
    assert "Score: 48" in out

    replay = json.loads(output.read_text(encoding="utf-8"))
    assert replay["seed"] == 1234
    assert replay["moves"] == "ULDRULDRUL"
    assert replay["moved"] == [True] * 10
    assert replay["states"][-1]["grid"] == [
        [2, 16, 0, 0],
        [2, 0, 0, 0],
        [4, 0, 2, 0],
        [0, 0, 0, 0],
    ]


def test_full_game_is_recorded(tmp_path, capsys):
    """Une partie jouée jusqu'au bout enregistre son score."""
    scores = tmp_path / "scores.json"
    code = main([
        "--seed", "7",
        "--player", "Ada",
        "--scores-file", str(scores),
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "fin de partie: True" in out

    data = json.loads(scores.read_text(encoding="utf-8"))
    assert len(data["scores"]) == 1
    assert data["scores"][0]["player_name"] == "Ada"


def test_same_seed_same_output(tmp_path, capsys):
    """Deux exécutions de même graine produisent le même rejeu."""
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    main(["--seed", "99", "--max-moves", "50", "--no-record", "--output", str(first)])
    main(["--seed", "99", "--max-moves", "50", "--no-record", "--output", str(second)])
    capsys.readouterr()

    assert json.loads(first.read_text()) == json.loads(second.read_text())


@pytest.mark.parametrize("argv", [
    ["--seed", "-1"],
    ["--seed", str(2**32)],
    ["--seed", "abc"],
    ["--moves", "UXD"],
])
def test_invalid_arguments(argv, capsys):
    """Les arguments invalides terminent avec le code 2."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["--no-record"])
    assert excinfo.value.code == 2


def test_format_grid():
    """Test le rendu texte de la grille."""
    text = format_grid([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2048]])
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0].split() == ["2", ".", ".", "."]
    assert lines[3].split() == [".", ".", ".", "2048"]
