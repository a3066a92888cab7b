"""
Self-play between difficulty tiers.

Used to check the engine end to end (the hard tier must never lose) and to
time it. X always moves first.
"""
from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

import numpy as np

from .board import Board, Mark
from .outcome import Outcome, RoundStatus, round_outcome
from .policy import Difficulty, choose_move

# Result codes for np.bincount: 0=draw, 1=X win, 2=O win (same as Mark values).
_DRAW = 0


@dataclass
class GameRecord:
    outcome: Outcome
    moves: List[int]


@dataclass
class SelfPlaySummary:
    x_tier: str
    o_tier: str
    games: int
    x_wins: int
    o_wins: int
    draws: int
    mean_length: float

    def as_metrics(self) -> Dict[str, float]:
        n = max(1, self.games)
        return {
            "x_win_rate": self.x_wins / n,
            "o_win_rate": self.o_wins / n,
            "draw_rate": self.draws / n,
            "mean_length": self.mean_length,
        }

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def play_game(x_tier: Difficulty, o_tier: Difficulty,
              rng: Optional[random.Random] = None) -> GameRecord:
    board = Board()
    tiers = {Mark.X: x_tier, Mark.O: o_tier}
    mover = Mark.X
    moves: List[int] = []
    outcome = round_outcome(board)
    while not outcome.is_over:
        idx = choose_move(board, mover, mover.opponent(), tiers[mover], rng)
        board.place(idx, mover)
        moves.append(idx)
        outcome = round_outcome(board, last_mover=mover)
        mover = mover.opponent()
    return GameRecord(outcome=outcome, moves=moves)


def run_selfplay(x_tier: Difficulty, o_tier: Difficulty, games: int,
                 seed: Optional[int] = None) -> SelfPlaySummary:
    if games < 1:
        raise ValueError(f"games must be >= 1, got {games}")
    rng = random.Random(seed)
    codes = np.zeros(games, dtype=np.int64)
    lengths = np.zeros(games, dtype=np.int64)
    for g in range(games):
        rec = play_game(x_tier, o_tier, rng)
        if rec.outcome.status == RoundStatus.WIN and rec.outcome.winner is not None:
            codes[g] = int(rec.outcome.winner)
        else:
            codes[g] = _DRAW
        lengths[g] = len(rec.moves)
    counts = np.bincount(codes, minlength=3)
    summary = SelfPlaySummary(
        x_tier=x_tier.name.lower(),
        o_tier=o_tier.name.lower(),
        games=games,
        x_wins=int(counts[Mark.X]),
        o_wins=int(counts[Mark.O]),
        draws=int(counts[_DRAW]),
        mean_length=float(lengths.mean()),
    )
    logging.info(
        "selfplay x=%s o=%s games=%d x_wins=%d o_wins=%d draws=%d mean_length=%.2f",
        summary.x_tier, summary.o_tier, games,
        summary.x_wins, summary.o_wins, summary.draws, summary.mean_length,
    )
    return summary
