from __future__ import annotations
from typing import Callable, Optional

from minifour.config import COLS
from minifour.errors import InvalidColumn, QuitGame
from minifour.types import Move

MOVE_PROMPT = f"\nEnter the corresponding number of the column in which to place your piece (0-{COLS - 1}): "
REPLAY_PROMPT = "\nWould you like to play again? (Y/N) "


def parse_move(raw: str, cols: int = COLS) -> Move:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        raise QuitGame()
    try:
        col = int(s)
    except ValueError:
        raise ValueError("That is not a number. Try again.") from None
    if col < 0 or col >= cols:
        raise InvalidColumn(col)
    return Move(col)


def ask_play_again(
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> bool:
    input_fn = input_fn or input
    output_fn = output_fn or print
    while True:
        answer = input_fn(REPLAY_PROMPT).strip().lower()
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False
        output_fn("Invalid input. Please enter 'Y' to play again or 'N' to quit.")
