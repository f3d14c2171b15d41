from __future__ import annotations
import logging
from typing import Optional, List, Tuple

from minifour.config import ROWS, COLS, CONNECT_N
from minifour.core.board import Board
from minifour.types import Cell, Coord, Player

log = logging.getLogger(__name__)

# (d_row, d_col, label) for each line orientation
DIRECTIONS: Tuple[Tuple[int, int, str], ...] = (
    (0, 1, "row"),
    (1, 0, "col"),
    (1, 1, "diag \\"),
    (-1, 1, "diag /"),
)


def _in_bounds(r: int, c: int) -> bool:
    return 0 <= r < ROWS and 0 <= c < COLS


def windows_through(row: int, col: int, dr: int, dc: int) -> List[List[Coord]]:
    """
    Every CONNECT_N-long window along (dr, dc) that contains (row, col)
    and fits on the board.
    """
    out: List[List[Coord]] = []
    for offset in range(CONNECT_N):
        start_r = row - offset * dr
        start_c = col - offset * dc
        line = [(start_r + i * dr, start_c + i * dc) for i in range(CONNECT_N)]
        if all(_in_bounds(r, c) for r, c in line):
            out.append(line)
    return out


def winning_line(board: Board, row: int, col: int, player: Player) -> Optional[List[Coord]]:
    g = board.grid
    want = player.cell
    for dr, dc, label in DIRECTIONS:
        for line in windows_through(row, col, dr, dc):
            if all(g[r][c] is want for r, c in line):
                log.debug("%s win for %s: %s", label, player.name, line)
                return line
    return None


def has_won(board: Board, row: int, col: int, player: Player) -> bool:
    return winning_line(board, row, col, player) is not None


def _player_for(cell: Cell) -> Player:
    return Player.HUMAN if cell is Cell.HUMAN else Player.COMPUTER


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    """First complete line anywhere on the board, one direction at a time."""
    g = board.grid
    for dr, dc, _ in DIRECTIONS:
        for r in range(ROWS):
            for c in range(COLS):
                p = g[r][c]
                if p is Cell.EMPTY:
                    continue
                line = [(r + i * dr, c + i * dc) for i in range(CONNECT_N)]
                if all(_in_bounds(x, y) and g[x][y] is p for x, y in line):
                    return _player_for(p), line
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
