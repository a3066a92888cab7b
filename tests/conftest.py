import random
from typing import List

import pytest

from ttt_duel.board import Board, Mark


class ScriptedInput:
    """Stand-in for input(): returns canned answers and records prompts."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def full_draw_board():
    # X O X / X O O / O X X
    return Board.from_string("121122211")


@pytest.fixture
def make_board():
    def _make(x: List[int], o: List[int]) -> Board:
        b = Board()
        for i in x:
            b.place(i, Mark.X)
        for i in o:
            b.place(i, Mark.O)
        return b
    return _make
