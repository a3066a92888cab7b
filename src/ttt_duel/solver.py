"""
Exhaustive minimax search with alpha-beta pruning, from the AI's perspective.
Tie-break policy:
- Scores are depth adjusted (see outcome.terminal_score): faster wins and
  slower losses score higher.
- Root candidates are tried centre, corners, then edges; among equal scores
  the first candidate in that order is kept.
- A candidate that wins on the spot (score 10) ends the root scan.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Mark
from .errors import NoMoveAvailable
from .outcome import WIN_SCORE, is_full, terminal_score

SEARCH_ORDER = (4, 0, 2, 6, 8, 1, 3, 5, 7)

# Sentinels outside the [-10, 10] score range.
NEG_INF = -100
POS_INF = 100


@dataclass
class SearchStats:
    nodes: int = 0


def search(cells: List[int], ai_mark: int, human_mark: int, depth: int,
           maximizing: bool, alpha: int, beta: int,
           stats: Optional[SearchStats] = None) -> int:
    """Value of ``cells`` with ``depth`` plies already played below the root.

    ``cells`` is mutated while exploring and restored before each recursive
    call returns, so siblings never see each other's moves.
    """
    if stats is not None:
        stats.nodes += 1
    score = terminal_score(cells, ai_mark, human_mark, depth)
    if score != 0 or is_full(cells):
        return score

    if maximizing:
        best = NEG_INF
        for i in range(9):
            if cells[i] != Mark.EMPTY:
                continue
            cells[i] = ai_mark
            val = search(cells, ai_mark, human_mark, depth + 1, False, alpha, beta, stats)
            cells[i] = Mark.EMPTY
            best = max(best, val)
            alpha = max(alpha, best)
            if beta <= alpha:
                break  # Prune
        return best

    best = POS_INF
    for i in range(9):
        if cells[i] != Mark.EMPTY:
            continue
        cells[i] = human_mark
        val = search(cells, ai_mark, human_mark, depth + 1, True, alpha, beta, stats)
        cells[i] = Mark.EMPTY
        best = min(best, val)
        beta = min(beta, best)
        if beta <= alpha:
            break  # Prune
    return best


def best_move(board: Board, ai_mark: Mark, human_mark: Mark,
              stats: Optional[SearchStats] = None) -> int:
    """Optimal cell index for ``ai_mark``. The board itself is left untouched."""
    if board.is_full():
        raise NoMoveAvailable()
    if stats is None:
        stats = SearchStats()
    cells = board.to_list()
    best_val, best_idx = NEG_INF, -1
    for idx in SEARCH_ORDER:
        if cells[idx] != Mark.EMPTY:
            continue
        cells[idx] = ai_mark
        val = search(cells, ai_mark, human_mark, 0, False, NEG_INF, POS_INF, stats)
        cells[idx] = Mark.EMPTY
        if val > best_val:
            best_val, best_idx = val, idx
            if best_val == WIN_SCORE:
                break
    logging.debug("best_move board=%s move=%d score=%d nodes=%d",
                  board.to_string(), best_idx, best_val, stats.nodes)
    return best_idx
