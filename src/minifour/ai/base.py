from __future__ import annotations
from typing import Protocol

from minifour.game.state import GameState
from minifour.types import Move


class Agent(Protocol):
    """Anything that can pick a column for the player whose turn it is."""

    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
