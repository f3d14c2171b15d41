import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from minifour import config
from minifour.core.board import Board
from minifour.types import Player


# 1 = human, 2 = computer; no four-in-a-row anywhere, 18 human / 17 computer pieces
NO_WIN_GRID = [[1 if ((c // 2) + r) % 2 == 0 else 2 for c in range(7)] for r in range(5)]


@pytest.fixture(autouse=True)
def quiet_ui(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def full_board():
    return Board(grid=[row[:] for row in NO_WIN_GRID])


class ScriptedAgent:
    """Plays a fixed list of columns, in order."""

    def __init__(self, moves, name="Scripted"):
        self.moves = list(moves)
        self.name = name
        self.calls = 0

    def choose_move(self, state):
        self.calls += 1
        return self.moves.pop(0)


def place_all(board, cols, player=Player.HUMAN):
    return [board.place(c, player) for c in cols]
