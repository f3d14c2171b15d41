from __future__ import annotations
from typing import Callable, Optional

from minifour.errors import ColumnFull
from minifour.game.state import GameState
from minifour.types import Move
from minifour.ui.prompts import MOVE_PROMPT, parse_move


class ConsoleHuman:
    """
    Reads a column from the console, asking again until it names an open column.
    Typing q/quit/exit raises QuitGame.
    """

    name = "Human"

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        # None means the console builtins, looked up at call time
        self._input_fn = input_fn
        self._output_fn = output_fn

    def input_fn(self, prompt: str) -> str:
        return (self._input_fn or input)(prompt)

    def output_fn(self, message: str) -> None:
        (self._output_fn or print)(message)

    def choose_move(self, state: GameState) -> Move:
        while True:
            try:
                move = parse_move(self.input_fn(MOVE_PROMPT), state.board.cols)
            except ValueError as e:
                self.output_fn(str(e))
                continue
            if move not in state.board.valid_moves():
                self.output_fn(str(ColumnFull(move)))
                continue
            return move
