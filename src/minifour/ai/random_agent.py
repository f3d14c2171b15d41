from __future__ import annotations
import random
from typing import Optional

from minifour.errors import NoValidMoves
from minifour.game.state import GameState
from minifour.types import Move


class RandomAgent:
    name = "Computer"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, state: GameState) -> Move:
        # Sample only open columns so there is nothing to retry.
        moves = state.board.valid_moves()
        if not moves:
            raise NoValidMoves("No valid moves.")
        return self.rng.choice(moves)
