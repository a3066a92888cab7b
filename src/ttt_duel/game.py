"""
Round and session bookkeeping around the move engine.

A Session owns one board and the running score. Each round starts empty,
alternates turns between the human and the AI, and ends on a win or a full
board; the next round is started by the other side.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import Board, Mark
from .outcome import ONGOING, Outcome, RoundStatus, round_outcome
from .policy import Difficulty, choose_move


def apply_human_move(board: Board, row: int, col: int, mark: Mark) -> Outcome:
    """Place ``mark`` at (row, col) and report the resulting round state.

    Raises OutOfRange or CellOccupied without touching the board.
    """
    board.set(row, col, mark)
    return round_outcome(board, last_mover=mark)


def apply_ai_move(board: Board, ai_mark: Mark, human_mark: Mark, difficulty: Difficulty,
                  rng: Optional[random.Random] = None) -> Tuple[int, Outcome]:
    idx = choose_move(board, ai_mark, human_mark, difficulty, rng)
    board.place(idx, ai_mark)
    return idx, round_outcome(board, last_mover=ai_mark)


@dataclass
class ScoreTally:
    human: int = 0
    ai: int = 0
    draws: int = 0

    def record(self, outcome: Outcome, human_mark: Mark) -> None:
        if outcome.status == RoundStatus.WIN:
            if outcome.winner == human_mark:
                self.human += 1
            else:
                self.ai += 1
        elif outcome.status == RoundStatus.DRAW:
            self.draws += 1
        else:
            raise ValueError("Cannot record a round that is still ongoing")

    @property
    def rounds(self) -> int:
        return self.human + self.ai + self.draws


@dataclass
class Session:
    human_mark: Mark
    difficulty: Difficulty
    human_starts: bool = True
    rng: random.Random = field(default_factory=random.Random)
    board: Board = field(default_factory=Board)
    tally: ScoreTally = field(default_factory=ScoreTally)
    outcome: Outcome = ONGOING
    human_to_move: bool = True
    recorded: bool = False

    def __post_init__(self) -> None:
        self.human_to_move = self.human_starts

    @property
    def ai_mark(self) -> Mark:
        return self.human_mark.opponent()

    def new_round(self) -> None:
        self.board.clear()
        self.outcome = ONGOING
        self.recorded = False
        self.human_to_move = self.human_starts

    def _ensure_ongoing(self) -> None:
        if self.outcome.is_over:
            raise RuntimeError(f"Round is already over ({self.outcome})")

    def human_turn(self, row: int, col: int) -> Outcome:
        self._ensure_ongoing()
        if not self.human_to_move:
            raise RuntimeError("It is the AI's turn")
        self.outcome = apply_human_move(self.board, row, col, self.human_mark)
        self.human_to_move = False
        return self.outcome

    def ai_turn(self) -> Tuple[int, Outcome]:
        self._ensure_ongoing()
        if self.human_to_move:
            raise RuntimeError("It is the human's turn")
        idx, self.outcome = apply_ai_move(
            self.board, self.ai_mark, self.human_mark, self.difficulty, self.rng
        )
        self.human_to_move = True
        logging.debug("ai(%s) plays %d -> %s", self.difficulty.name, idx, self.outcome)
        return idx, self.outcome

    def finish_round(self) -> Outcome:
        """Add the finished round to the tally; a round is counted once."""
        if not self.recorded:
            self.tally.record(self.outcome, self.human_mark)
            self.recorded = True
        return self.outcome

    def next_round(self) -> None:
        self.human_starts = not self.human_starts
        self.new_round()
