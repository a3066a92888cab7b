import pytest

from ttt_duel.board import Mark
from ttt_duel.config import GameConfig
from ttt_duel.policy import Difficulty


def test_empty_env_leaves_everything_unset():
    cfg = GameConfig.from_env({})
    assert cfg == GameConfig()


def test_env_values_are_parsed():
    cfg = GameConfig.from_env({
        "TTT_DUEL_MARK": "o",
        "TTT_DUEL_DIFFICULTY": "medium",
        "TTT_DUEL_FIRST": "ai",
        "TTT_DUEL_COLOR": "no",
        "TTT_DUEL_SEED": "17",
    })
    assert cfg.human_mark == Mark.O
    assert cfg.difficulty == Difficulty.MEDIUM
    assert cfg.human_starts is False
    assert cfg.color is False
    assert cfg.seed == 17


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TTT_DUEL_DIFFICULTY", "2")
    monkeypatch.delenv("TTT_DUEL_MARK", raising=False)
    cfg = GameConfig.from_env()
    assert cfg.difficulty == Difficulty.HARD
    assert cfg.human_mark is None


@pytest.mark.parametrize("key,value", [
    ("TTT_DUEL_MARK", "Z"),
    ("TTT_DUEL_DIFFICULTY", "insane"),
    ("TTT_DUEL_FIRST", "nobody"),
    ("TTT_DUEL_COLOR", "maybe"),
    ("TTT_DUEL_SEED", "abc"),
])
def test_bad_env_values_raise(key, value):
    with pytest.raises(ValueError):
        GameConfig.from_env({key: value})


def test_merged_keeps_unset_overrides_out():
    base = GameConfig(human_mark=Mark.X, difficulty=Difficulty.EASY)
    cfg = base.merged(difficulty=Difficulty.HARD, human_mark=None, color=False)
    assert cfg.human_mark == Mark.X
    assert cfg.difficulty == Difficulty.HARD
    assert cfg.color is False
    assert base.difficulty == Difficulty.EASY
