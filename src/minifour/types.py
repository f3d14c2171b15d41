# src/minifour/types.py

from __future__ import annotations
from enum import Enum, IntEnum
from typing import NewType, Tuple

Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)


class Cell(IntEnum):
    # Values match what the board shows on screen.
    EMPTY = 0
    HUMAN = 1
    COMPUTER = 2


class Player(Enum):
    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def cell(self) -> Cell:
        return Cell.HUMAN if self is Player.HUMAN else Cell.COMPUTER

    def other(self) -> "Player":
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN
