from __future__ import annotations
from typing import Optional, Iterable, Set

from minifour import config
from minifour.core.board import Board
from minifour.types import Coord
from minifour.ui.colors import c, piece, BOLD, DIM, FG_CYAN, REVERSE, RESET

SEPARATOR = "-" * 28


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i) for i in range(board.cols)), DIM)]
    for r, row in enumerate(board.rows_view()):
        parts = []
        for cidx, cell in enumerate(row):
            p = piece(cell)
            if (r, cidx) in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            elif (r, cidx) in hl:
                p = "*"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(SEPARATOR)
    if status:
        print(c(status, FG_CYAN))

    for line in board_lines(board, highlight):
        print(line)


def banner() -> None:
    print(c("\nWelcome to Connect 4!", BOLD) + " When looking at the board, your pieces are marked with a 1, "
          "the computer's pieces with a 2, and empty spaces with a 0.")
    print("Here's the current board:")
