import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tictactoe_core.cli import play
from tictactoe_core.config import Settings
from tictactoe_core.controller import GameController
from tictactoe_core.engine import Mode
from tictactoe_core.scoring import KeyValueScoreStore

SRC = str(Path(__file__).resolve().parents[1] / "src")


def _run_cli(args: list[str], cwd: Path, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = SRC + os.pathsep + env.get("PYTHONPATH", "")
    exe = [sys.executable, "-m", "tictactoe_core.cli"]
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, input=stdin, env=env)


def test_cli_evaluate_win(tmp_path: Path):
    r = _run_cli(["evaluate", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "board=111220000" in s
    assert "result=win" in s and "winner=X" in s and "line=[0, 1, 2]" in s


def test_cli_evaluate_in_progress(tmp_path: Path):
    r = _run_cli(["evaluate", "--board", "100020000"], cwd=tmp_path)
    assert r.returncode == 0
    assert "result=in_progress" in r.stdout + r.stderr
    assert "to_move=X" in r.stdout + r.stderr


def test_cli_suggest_block(tmp_path: Path):
    r = _run_cli(["suggest", "--board", "110020000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "board=110020000" in s
    assert "to_move=O" in s and "move=2" in s and "blocks=[2]" in s


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["evaluate", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["suggest", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_error_unreachable_and_finished(tmp_path: Path):
    r = _run_cli(["evaluate", "--board", "111222000"], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["suggest", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_play_hvc_subprocess(tmp_path: Path):
    r = _run_cli(["--seed", "1", "play", "--mode", "hvc", "--delay-ms", "0"], cwd=tmp_path, stdin="1\nq\n")
    assert r.returncode == 0
    assert "O plays 5" in r.stdout


def test_cli_play_rejects_negative_delay(tmp_path: Path):
    r = _run_cli(["play", "--delay-ms", "-1"], cwd=tmp_path, stdin="q\n")
    assert r.returncode == 2


def _ctl(mode: Mode) -> GameController:
    return GameController(mode=mode, store=KeyValueScoreStore({}),
                          settings=Settings(opponent_delay_ms=0, seed=0))


def test_play_hvh_to_win():
    out = io.StringIO()
    ctl = _ctl(Mode.HUMAN_VS_HUMAN)
    assert play(ctl, io.StringIO("1\n4\n2\n5\n3\nq\n"), out) == 0
    text = out.getvalue()
    assert "Result: X wins" in text
    assert "Score X=1 O=0 ties=0" in text
    assert "[X]|[X]|[X]" in text


def test_play_commands_and_bad_input(caplog):
    out = io.StringIO()
    ctl = _ctl(Mode.HUMAN_VS_HUMAN)
    play(ctl, io.StringIO("5\n5\nzz\n10\nr\n1\ns\nq\n"), out)
    assert "already occupied" in caplog.text
    assert "Unknown command" in caplog.text
    assert ctl.board == [0] * 9
    assert ctl.score.games_played == 0


def test_play_hvc_opponent_replies():
    out = io.StringIO()
    ctl = _ctl(Mode.HUMAN_VS_SCRIPTED)
    play(ctl, io.StringIO("1\n2\n"), out)
    assert "O plays 5" in out.getvalue()
    assert "O plays 3" in out.getvalue()
    assert ctl.board[:3] == [1, 1, 2]


def test_cli_evaluate_echoes_normalized_board(tmp_path: Path):
    r = _run_cli(["evaluate", "--board", " 100020000 "], cwd=tmp_path)
    assert r.returncode == 0
    assert "board=100020000 " in r.stdout + r.stderr
