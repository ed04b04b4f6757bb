import pytest

from tictactoe_core.config import DEFAULT_DELAY_MS, Settings, load_settings
from tictactoe_core.scoring import DEFAULT_SCORE_KEY


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("TTT_OPPONENT_DELAY_MS", "TTT_SEED", "TTT_SCORE_KEY"):
        monkeypatch.delenv(var, raising=False)


def test_defaults_when_env_unset():
    s = load_settings()
    assert s == Settings()
    assert s.opponent_delay_ms == DEFAULT_DELAY_MS == 600
    assert s.opponent_delay == pytest.approx(0.6)
    assert s.seed is None
    assert s.score_key == DEFAULT_SCORE_KEY


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_OPPONENT_DELAY_MS", "0")
    monkeypatch.setenv("TTT_SEED", "42")
    monkeypatch.setenv("TTT_SCORE_KEY", "scores")
    s = load_settings()
    assert s.opponent_delay_ms == 0
    assert s.seed == 42
    assert s.score_key == "scores"


def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("TTT_SEED", "  ")
    monkeypatch.setenv("TTT_SCORE_KEY", "")
    s = load_settings()
    assert s.seed is None
    assert s.score_key == DEFAULT_SCORE_KEY


@pytest.mark.parametrize("var,value", [
    ("TTT_OPPONENT_DELAY_MS", "fast"),
    ("TTT_OPPONENT_DELAY_MS", "-5"),
    ("TTT_SEED", "1.5"),
])
def test_bad_values_raise(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError):
        load_settings()
