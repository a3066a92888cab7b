"""
Difficulty tiers and the dispatcher that routes a move request to a policy.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from .board import Board, Mark
from .errors import NoMoveAvailable
from .solver import best_move
from .tactics import heuristic_move


class Difficulty(Enum):
    EASY = 0      # Random moves
    MEDIUM = 1    # Win, block, centre/corner
    HARD = 2      # Full minimax

    @classmethod
    def parse(cls, raw: str) -> "Difficulty":
        """Accept a tier name (any case) or its number 0-2."""
        key = raw.strip()
        if key.isdigit():
            return cls(int(key))
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {raw!r} (expected easy, medium or hard)") from None


def random_move(board: Board, rng: Optional[random.Random] = None) -> int:
    empties = board.empty_cells()
    if not empties:
        raise NoMoveAvailable()
    return (rng or random).choice(empties)


def choose_move(board: Board, ai_mark: Mark, human_mark: Mark, difficulty: Difficulty,
                rng: Optional[random.Random] = None) -> int:
    if difficulty == Difficulty.EASY:
        return random_move(board, rng)
    if difficulty == Difficulty.MEDIUM:
        return heuristic_move(board, ai_mark, human_mark, rng)
    return best_move(board, ai_mark, human_mark)
