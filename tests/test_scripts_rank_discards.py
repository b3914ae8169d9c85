from __future__ import annotations

import builtins
import os
import runpy
import subprocess
import sys
from pathlib import Path

import pytest

from scripts.rank_discards import main

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "rank_discards.py"


def run_script(path: Path, argv: list[str]) -> None:
    old_argv = sys.argv[:]
    try:
        sys.argv = [str(path)] + argv
        runpy.run_path(str(path), run_name="__main__")
    finally:
        sys.argv = old_argv


def fake_input(monkeypatch, answers: list[str]) -> list[str]:
    prompts: list[str] = []
    remaining = iter(answers)

    def _input(prompt=""):
        prompts.append(prompt)
        return next(remaining)

    monkeypatch.setattr(builtins, "input", _input)
    return prompts


def test_score_option_prints_breakdown(capsys):
    assert main(["--score", "5C", "5S", "5D", "JH", "5H"]) == 0
    out = capsys.readouterr().out
    assert "fifteens:  16" in out
    assert "nobs:      1" in out
    assert "Total: 29" in out


def test_score_option_rejects_starter_in_hand(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--score", "5C", "5S", "5D", "JH", "5C"])
    assert exc.value.code == 2
    assert "already in the hand" in capsys.readouterr().err


def test_cards_option_ranks_discards(capsys):
    assert main(["--cards", "5C", "5S", "5D", "5H", "1S", "2S"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    header = lines.index("---Drop combinations by average points---")
    assert lines[header + 1] == "#1: Ace of spades and Two of spades: 22.78 (**)"
    assert "(*) Consider keeping fives if you don't have the crib" in out
    assert sum(1 for line in lines if line.startswith("#")) == 15


@pytest.mark.parametrize(
    "argv",
    [
        ["--cards", "5C", "5S", "5D", "5H"],
        ["--cards", "5C", "5S", "5D", "5H", "XX"],
        ["--cards", "5C", "5S", "5D", "5H", "5C"],
        ["--players", "3", "--cards", "5C", "5S", "5D", "5H", "1S", "2S"],
        ["--players", "5"],
        ["--workers", "0", "--cards", "5C", "5S", "5D", "5H", "1S"],
    ],
)
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_interactive_prompts_until_valid(monkeypatch, capsys):
    prompts = fake_input(monkeypatch, ["7", "3", "5C", "11C", "5C", "5S", "5D", "5H", "1S"])
    assert main([]) == 0
    assert prompts[1] == "Invalid input. Try again: "
    assert prompts.count("Invalid or duplicate card, input again: ") == 2
    out = capsys.readouterr().out
    assert "5 cards to start" in out
    assert "#1: Ace of spades: " in out


def test_run_as_script(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("CRIB_CALC_LOG_FILE", str(tmp_path / "run.log"))
    with pytest.raises(SystemExit) as exc:
        run_script(SCRIPT, ["--score", "9D", "10D", "JD", "QD", "KD"])
    assert exc.value.code == 0
    assert "Total: 11" in capsys.readouterr().out


def test_script_run_directly_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "calc.log"
    env = os.environ.copy()
    env["CRIB_CALC_LOG_FILE"] = str(log_file)
    env.pop("PYTHONPATH", None)
    result = subprocess.run(
        [sys.executable, str(SCRIPT), "--cards", "5C", "5S", "5D", "5H", "1S", "2S"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert "INFO cribbage_calc.discard: Ranking 15 discard options" in result.stdout
    assert log_file.exists()
    assert "Ranking 15 discard options" in log_file.read_text(encoding="utf-8")
