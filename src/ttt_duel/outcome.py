"""
Outcome evaluation: win lines, draw detection, terminal scoring.
Teaching notes:
- Every helper takes a Board or any sequence of nine 0/1/2 cells, so the
  search can run on a plain scratch list.
- Terminal scores are depth adjusted: a win found sooner scores higher and
  a loss found later scores higher, which is what makes the search prefer
  quick wins and slow losses.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .board import Mark

# Rows, then columns, then diagonals. Scan order matters to the heuristic.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

WIN_SCORE = 10


def has_line(cells: Sequence[int], mark: int) -> bool:
    return any(cells[a] == mark and cells[b] == mark and cells[c] == mark
               for a, b, c in WIN_LINES)


def winning_line(cells: Sequence[int], mark: int) -> Optional[Tuple[int, int, int]]:
    for line in WIN_LINES:
        if all(cells[i] == mark for i in line):
            return line
    return None


def is_full(cells: Sequence[int]) -> bool:
    return all(v != Mark.EMPTY for v in cells)


def terminal_score(cells: Sequence[int], ai_mark: int, human_mark: int, depth: int) -> int:
    if has_line(cells, ai_mark):
        return WIN_SCORE - depth
    if has_line(cells, human_mark):
        return depth - WIN_SCORE
    return 0


def is_terminal(cells: Sequence[int], ai_mark: int, human_mark: int, depth: int = 0) -> bool:
    return terminal_score(cells, ai_mark, human_mark, depth) != 0 or is_full(cells)


class RoundStatus(Enum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Round state reported to the game loop after every move."""
    status: RoundStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self) -> bool:
        return self.status != RoundStatus.ONGOING

    def __str__(self) -> str:
        if self.status == RoundStatus.WIN and self.winner is not None:
            return f"win({self.winner.symbol})"
        return self.status.value


ONGOING = Outcome(RoundStatus.ONGOING)
DRAW = Outcome(RoundStatus.DRAW)


def round_outcome(cells: Sequence[int], last_mover: Optional[Mark] = None) -> Outcome:
    """Classify a position as ongoing, won or drawn.

    When ``last_mover`` is given and owns a line, it is reported as the
    winner. Otherwise X is checked before O; a board where both marks own a
    line cannot come from legal play, so that order only matters for
    hand-built positions.
    """
    candidates = (Mark.X, Mark.O)
    if last_mover is not None and last_mover != Mark.EMPTY:
        candidates = (Mark(last_mover), Mark(last_mover).opponent())
    for mark in candidates:
        line = winning_line(cells, mark)
        if line is not None:
            return Outcome(RoundStatus.WIN, winner=mark, line=line)
    if is_full(cells):
        return DRAW
    return ONGOING
