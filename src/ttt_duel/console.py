"""
Terminal front end: colours, board drawing, validated prompts, the round loop.

Nothing in the engine depends on this module. Colour support is detected
once and carried around as a Palette value.
"""
from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .board import SIZE, Board, Mark
from .config import GameConfig
from .errors import CellOccupied
from .game import ScoreTally, Session
from .outcome import RoundStatus
from .policy import Difficulty

Reader = Callable[[str], str]
Writer = Callable[[str], None]

ANSI_TERMS = ("xterm", "ansi", "color", "linux")


def detect_ansi(env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    if env.get("NO_COLOR"):
        return False
    term = env.get("TERM", "")
    return any(t in term for t in ANSI_TERMS)


@dataclass(frozen=True)
class Palette:
    red: str = ""
    blue: str = ""
    reset: str = ""
    clear: str = ""

    @classmethod
    def ansi(cls) -> "Palette":
        return cls(red="\033[31m", blue="\033[34m", reset="\033[0m", clear="\033[H\033[J")

    @classmethod
    def plain(cls) -> "Palette":
        return cls()

    @classmethod
    def for_terminal(cls, color: Optional[bool] = None,
                     env: Optional[Mapping[str, str]] = None) -> "Palette":
        enabled = detect_ansi(env) if color is None else color
        return cls.ansi() if enabled else cls.plain()

    def paint(self, mark: Mark) -> str:
        if mark == Mark.EMPTY:
            return mark.symbol
        colour = self.red if mark == Mark.X else self.blue
        return f"{colour}{mark.symbol}{self.reset}"


def render_board(board: Board, palette: Palette) -> str:
    rows = []
    for r in range(SIZE):
        rows.append("|".join(f" {palette.paint(board.get(r, c))} " for c in range(SIZE)))
    return palette.clear + "\n" + "\n---+---+---\n".join(rows) + "\n"


def ask_int(prompt: str, lo: int, hi: int, read: Reader = input) -> int:
    """Read an integer in [lo, hi], re-prompting until one is given."""
    raw = read(prompt)
    while True:
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
        if value is not None and lo <= value <= hi:
            return value
        raw = read("Invalid input. Try again: ")


def _human_turn(session: Session, read: Reader, write: Writer) -> None:
    while True:
        row = ask_int("Row (1-3): ", 1, 3, read) - 1
        col = ask_int("Column (1-3): ", 1, 3, read) - 1
        try:
            session.human_turn(row, col)
            return
        except CellOccupied:
            write("That cell is already taken.")


def _announce(session: Session, palette: Palette, write: Writer) -> None:
    outcome = session.outcome
    if outcome.status == RoundStatus.WIN:
        if outcome.winner == session.human_mark:
            write(f"{palette.red}You win this round!{palette.reset}")
        else:
            write(f"{palette.blue}The AI wins this round.{palette.reset}")
    else:
        write("Draw.")


def format_score(tally: ScoreTally) -> str:
    return f"Score: You {tally.human}  |  AI {tally.ai}  |  Draws {tally.draws}"


def run_interactive(config: GameConfig, read: Reader = input, write: Writer = print) -> ScoreTally:
    palette = Palette.for_terminal(config.color)
    write("+------------------------------+")
    write("|        TIC-TAC-TOE 3x3       |")
    write("+------------------------------+")

    human_mark = config.human_mark
    if human_mark is None:
        human_mark = Mark.X if ask_int("Play X (1) or O (2)? ", 1, 2, read) == 1 else Mark.O
    difficulty = config.difficulty
    if difficulty is None:
        difficulty = Difficulty(ask_int("Difficulty 0=Easy 1=Medium 2=Hard: ", 0, 2, read))
    human_starts = config.human_starts
    if human_starts is None:
        human_starts = ask_int("Do you start? 1=Yes 0=No: ", 0, 1, read) == 1

    session = Session(human_mark, difficulty, human_starts, rng=random.Random(config.seed))
    while True:
        while not session.outcome.is_over:
            write(render_board(session.board, palette))
            if session.human_to_move:
                _human_turn(session, read, write)
            else:
                idx, _ = session.ai_turn()
                r, c = divmod(idx, SIZE)
                write(f"AI plays row {r + 1}, column {c + 1}")
        write(render_board(session.board, palette))
        session.finish_round()
        _announce(session, palette, write)
        write(format_score(session.tally))
        if ask_int("Play again? 1=Yes 0=No: ", 0, 1, read) != 1:
            break
        session.next_round()

    write("Thanks for playing!")
    return session.tally
