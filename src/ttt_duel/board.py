"""
Board representation for a 3x3 game.
Teaching notes:
- Cells are stored flat, index = 3 * row + col, values 0=empty, 1=X, 2=O.
- The same 0/1/2 digits give the string form used on the command line,
  e.g. "100020000" is X in the top-left corner and O in the centre.
- A placed mark is never removed during a round; clear() starts a new one.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterator, List, Tuple

from .errors import CellOccupied, OutOfRange

SIZE = 3
CELL_COUNT = SIZE * SIZE

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    def opponent(self) -> "Mark":
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return {Mark.EMPTY: " ", Mark.X: "X", Mark.O: "O"}[self]

    @classmethod
    def parse(cls, raw: str) -> "Mark":
        """Parse "X"/"O" (any case) or "1"/"2" into a player mark."""
        key = raw.strip().upper()
        if key in ("X", "1"):
            return cls.X
        if key in ("O", "2"):
            return cls.O
        raise ValueError(f"Unknown mark: {raw!r} (expected X or O)")


def index_of(row: int, col: int) -> int:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise OutOfRange(f"Invalid position ({row}, {col}). Must be 0-2.")
    return row * SIZE + col


def coords_of(index: int) -> Tuple[int, int]:
    if not 0 <= index < CELL_COUNT:
        raise OutOfRange(f"Invalid cell index {index}. Must be 0-8.")
    return divmod(index, SIZE)


class Board:
    """Fixed 3x3 grid of marks.

    Flat indexing (``board[4]``), ``len()`` and iteration expose the nine
    cells in row-major order, so the outcome helpers accept a Board or any
    plain sequence of nine marks.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: List[int] | None = None) -> None:
        if cells is None:
            self._cells: List[Mark] = [Mark.EMPTY] * CELL_COUNT
        else:
            if len(cells) != CELL_COUNT:
                raise ValueError(f"A board has {CELL_COUNT} cells, got {len(cells)}")
            self._cells = [Mark(v) for v in cells]

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        raw = raw.strip()
        if len(raw) != CELL_COUNT or any(c not in "012" for c in raw):
            raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
        return cls([int(c) for c in raw])

    def to_string(self) -> str:
        return "".join(str(int(v)) for v in self._cells)

    def get(self, row: int, col: int) -> Mark:
        return self._cells[index_of(row, col)]

    def set(self, row: int, col: int, mark: Mark) -> None:
        idx = index_of(row, col)
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an EMPTY mark")
        current = self._cells[idx]
        if current != Mark.EMPTY:
            raise CellOccupied(row, col, current)
        self._cells[idx] = Mark(mark)

    def place(self, index: int, mark: Mark) -> None:
        row, col = coords_of(index)
        self.set(row, col, mark)

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def clear(self) -> None:
        self._cells = [Mark.EMPTY] * CELL_COUNT

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        return self._cells.count(mark)

    def copy(self) -> "Board":
        return Board(list(self._cells))

    def to_list(self) -> List[int]:
        return [int(v) for v in self._cells]

    def __getitem__(self, index: int) -> Mark:
        return self._cells[index]

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
