"""
The first version of win detection: six fixed-offset detectors.

The diagonal detectors only run when the anchor sits in a corner region, then
sweep every window starting in that region. A diagonal completed by a piece
landing in row 2 is never seen. Kept for measuring that gap in self-play; games
are decided with rules.has_won.
"""

from __future__ import annotations
import logging

from minifour.core.board import Board
from minifour.types import Player

log = logging.getLogger(__name__)


def _row_win(g, row: int, p) -> bool:
    for i in range(4):
        if p == g[row][i] == g[row][i + 1] == g[row][i + 2] == g[row][i + 3]:
            return True
    return False


def _col_win(g, row: int, col: int, p) -> bool:
    if row <= 1:
        return p == g[row][col] == g[row + 1][col] == g[row + 2][col] == g[row + 3][col]
    return False


def _down_left_win(g, row: int, col: int, p) -> bool:
    if row <= 1 and col >= 3:
        for i in range(2):
            for j in range(3, 7):
                if p == g[i][j] == g[i + 1][j - 1] == g[i + 2][j - 2] == g[i + 3][j - 3]:
                    return True
    return False


def _up_left_win(g, row: int, col: int, p) -> bool:
    if row >= 3 and col >= 3:
        for i in range(3, 5):
            for j in range(3, 7):
                if p == g[i][j] == g[i - 1][j - 1] == g[i - 2][j - 2] == g[i - 3][j - 3]:
                    return True
    return False


def _down_right_win(g, row: int, col: int, p) -> bool:
    if row <= 1 and col <= 3:
        for i in range(2):
            for j in range(4):
                if p == g[i][j] == g[i + 1][j + 1] == g[i + 2][j + 2] == g[i + 3][j + 3]:
                    return True
    return False


def _up_right_win(g, row: int, col: int, p) -> bool:
    if row >= 3 and col <= 3:
        for i in range(3, 5):
            for j in range(4):
                if p == g[i][j] == g[i - 1][j + 1] == g[i - 2][j + 2] == g[i - 3][j + 3]:
                    return True
    return False


def has_won_fixed_offset(board: Board, row: int, col: int, player: Player) -> bool:
    g = board.grid
    p = player.cell
    checks = (
        ("row", _row_win(g, row, p)),
        ("col", _col_win(g, row, col, p)),
        ("downleft", _down_left_win(g, row, col, p)),
        ("downright", _down_right_win(g, row, col, p)),
        ("upleft", _up_left_win(g, row, col, p)),
        ("upright", _up_right_win(g, row, col, p)),
    )
    for label, hit in checks:
        if hit:
            log.debug("%s win (fixed-offset) for %s at (%d, %d)", label, player.name, row, col)
            return True
    return False
