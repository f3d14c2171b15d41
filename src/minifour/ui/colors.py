from __future__ import annotations
from minifour import config
from minifour.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_CYAN = "\033[36m"

# digit shown for each cell, and its colour
PIECES = {
    Cell.EMPTY: ("0", "\033[90m"),
    Cell.HUMAN: ("1", "\033[31m"),
    Cell.COMPUTER: ("2", "\033[33m"),
}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def piece(cell: Cell) -> str:
    digit, code = PIECES[cell]
    return c(digit, code)
