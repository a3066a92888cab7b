"""Session settings, environment first.

Each setting left unset (None) is asked for interactively, or for ``color``
auto-detected from the terminal. Command-line flags override the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .board import Mark
from .policy import Difficulty

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    key = raw.strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_first(raw: str) -> bool:
    key = raw.strip().lower()
    if key in ("human", "h", "1", "yes"):
        return True
    if key in ("ai", "computer", "0", "no"):
        return False
    raise ValueError(f"TTT_DUEL_FIRST must be human or ai, got {raw!r}")


@dataclass
class GameConfig:
    human_mark: Optional[Mark] = None
    difficulty: Optional[Difficulty] = None
    human_starts: Optional[bool] = None
    color: Optional[bool] = None
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        env = os.environ if env is None else env
        cfg = cls()
        mark = env.get("TTT_DUEL_MARK")
        if mark:
            cfg.human_mark = Mark.parse(mark)
        diff = env.get("TTT_DUEL_DIFFICULTY")
        if diff:
            cfg.difficulty = Difficulty.parse(diff)
        first = env.get("TTT_DUEL_FIRST")
        if first:
            cfg.human_starts = _parse_first(first)
        color = env.get("TTT_DUEL_COLOR")
        if color:
            cfg.color = _parse_bool("TTT_DUEL_COLOR", color)
        seed = env.get("TTT_DUEL_SEED")
        if seed:
            cfg.seed = int(seed)
        return cfg

    def merged(self, **overrides: object) -> "GameConfig":
        """Copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return GameConfig(**{**self.__dict__, **values})
