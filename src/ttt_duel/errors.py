"""
Error kinds raised by the board and the move engine.
"""
from __future__ import annotations

from typing import Optional


class TicTacToeError(Exception):
    """Base class for every error raised by ttt_duel."""


class OutOfRange(TicTacToeError, IndexError):
    """A row, column or flat index outside the 3x3 grid was used."""


class CellOccupied(TicTacToeError, ValueError):
    """A mark was placed on a cell that already holds one."""

    def __init__(self, row: int, col: int, mark: Optional[object] = None) -> None:
        self.row = row
        self.col = col
        self.mark = mark
        super().__init__(f"Cell ({row}, {col}) is already occupied")


class NoMoveAvailable(TicTacToeError, RuntimeError):
    """A move was requested on a full board.

    The round should already have ended; this is a sequencing bug in the
    caller, not something to recover from.
    """

    def __init__(self, message: str = "No empty cell left on the board") -> None:
        super().__init__(message)
