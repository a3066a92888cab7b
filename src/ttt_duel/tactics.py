"""
Single-ply tactics: complete a line, block a line, positional preference.
Teaching notes:
- Lines are scanned in WIN_LINES order (rows, columns, diagonals) and the
  first qualifying line decides, so ties always resolve the same way.
- These rules are the whole of the medium opponent; they see one move ahead.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .board import CENTER, CORNERS, Mark
from .errors import NoMoveAvailable
from .outcome import WIN_LINES

PREFERRED_CELLS = (CENTER,) + CORNERS


def find_line_completion(cells: Sequence[int], mark: int) -> Optional[int]:
    """Empty cell of the first line holding two ``mark`` and one empty cell."""
    for a, b, c in WIN_LINES:
        va, vb, vc = cells[a], cells[b], cells[c]
        if va == mark and vb == mark and vc == Mark.EMPTY:
            return c
        if va == mark and vb == Mark.EMPTY and vc == mark:
            return b
        if va == Mark.EMPTY and vb == mark and vc == mark:
            return a
    return None


def immediate_winning_moves(cells: Sequence[int], mark: int) -> List[int]:
    wins: List[int] = []
    for a, b, c in WIN_LINES:
        line = [cells[a], cells[b], cells[c]]
        if line.count(mark) == 2 and line.count(Mark.EMPTY) == 1:
            cell = (a, b, c)[line.index(Mark.EMPTY)]
            if cell not in wins:
                wins.append(cell)
    return sorted(wins)


def fork_moves(cells: Sequence[int], mark: int) -> List[int]:
    forks: List[int] = []
    for i, v in enumerate(cells):
        if v != Mark.EMPTY:
            continue
        b = list(cells)
        b[i] = mark
        if len(immediate_winning_moves(b, mark)) >= 2:
            forks.append(i)
    return forks


def preferred_cell(cells: Sequence[int]) -> Optional[int]:
    for idx in PREFERRED_CELLS:
        if cells[idx] == Mark.EMPTY:
            return idx
    return None


def heuristic_move(cells: Sequence[int], ai_mark: Mark, human_mark: Mark,
                   rng: Optional[random.Random] = None) -> int:
    empties = [i for i, v in enumerate(cells) if v == Mark.EMPTY]
    if not empties:
        raise NoMoveAvailable()
    move = find_line_completion(cells, ai_mark)
    if move is None:
        move = find_line_completion(cells, human_mark)
    if move is None:
        move = preferred_cell(cells)
    if move is None:
        move = (rng or random).choice(empties)
    return move
