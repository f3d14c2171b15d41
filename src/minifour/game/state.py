from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from minifour.core.board import Board
from minifour.types import Coord, Player


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = Player.HUMAN
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[List[Coord]] = None
    last_move: Optional[Coord] = None
    moves_played: int = 0
    last_status: str = "You go first."

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS


def new_game() -> GameState:
    return GameState(board=Board(), current=Player.HUMAN)
