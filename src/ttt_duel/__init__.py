"""ttt_duel package.

Tic-tac-toe against the computer: board and outcome rules, three AI tiers
(random, heuristic, alpha-beta minimax), a terminal front end and a CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, Mark
from .errors import CellOccupied, NoMoveAvailable, OutOfRange, TicTacToeError
from .outcome import Outcome, RoundStatus, has_line, round_outcome, terminal_score
from .policy import Difficulty, choose_move
from .solver import best_move
from .tactics import heuristic_move

__all__ = [
    "Board",
    "Mark",
    "Difficulty",
    "choose_move",
    "best_move",
    "heuristic_move",
    "has_line",
    "terminal_score",
    "round_outcome",
    "Outcome",
    "RoundStatus",
    "TicTacToeError",
    "OutOfRange",
    "CellOccupied",
    "NoMoveAvailable",
]
