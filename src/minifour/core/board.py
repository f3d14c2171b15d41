
# src/minifour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, List, Tuple

from minifour.config import ROWS, COLS
from minifour.errors import ColumnFull, InvalidColumn
from minifour.types import Cell, Coord, Move, Player

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Board:
    rows: ClassVar[int] = ROWS
    cols: ClassVar[int] = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]
            return
        if len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Board grid must be {self.rows}x{self.cols}.")
        self.grid = [[Cell(v) for v in row] for row in self.grid]

    @classmethod
    def with_pieces(cls, pieces: Iterable[Tuple[int, int, Player]]) -> "Board":
        """
        Build a board from explicit (row, col, player) triples.
        Gravity is not enforced here; handy for setting up positions in tests/analysis.
        """
        b = cls()
        for r, c, p in pieces:
            b.grid[r][c] = p.cell
        return b

    def copy(self) -> "Board":
        b = Board()
        b.grid = [row[:] for row in self.grid]
        return b

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def rows_view(self) -> Tuple[Tuple[Cell, ...], ...]:
        # Read-only, row-major snapshot for display.
        return tuple(tuple(row) for row in self.grid)

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is Cell.EMPTY]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not Cell.EMPTY for c in range(self.cols))

    def piece_count(self) -> int:
        return sum(1 for row in self.grid for v in row if v is not Cell.EMPTY)

    def place(self, col: Move, player: Player) -> Coord:
        if isinstance(col, bool) or not isinstance(col, int):
            raise InvalidColumn(col)
        c = int(col)
        if c < 0 or c >= self.cols:
            raise InvalidColumn(c)
        if self.grid[0][c] is not Cell.EMPTY:
            raise ColumnFull(c)

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is Cell.EMPTY:
                self.grid[r][c] = player.cell
                log.debug("%s placed at (%d, %d)", player.name, r, c)
                return r, c

        raise ColumnFull(c)  # unreachable while gravity holds
