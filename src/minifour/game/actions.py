from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from minifour.core.rules import winning_line
from minifour.errors import GameOver
from minifour.game.state import GameState, GameStatus
from minifour.types import Coord, Move, Player

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    coord: Coord
    status: GameStatus
    winner: Optional[Player] = None


def apply_move(state: GameState, move: Move) -> MoveResult:
    """
    Drop a piece for the current player and advance the game.

    Win is checked at the landing square only. The turn passes to the other
    player only when the game is still in progress. Placement errors propagate
    and leave the state as it was.
    """
    if state.is_over:
        raise GameOver(f"Game already finished ({state.status.value}).")

    player = state.current
    row, col = state.board.place(move, player)
    state.last_move = (row, col)
    state.moves_played += 1

    line = winning_line(state.board, row, col, player)
    if line is not None:
        state.status = GameStatus.WON
        state.winner = player
        state.winning_line = line
        log.info("%s wins after %d moves", player.name, state.moves_played)
        return MoveResult((row, col), state.status, player)

    if state.board.is_full():
        state.status = GameStatus.DRAWN
        log.info("Board full after %d moves; draw", state.moves_played)
        return MoveResult((row, col), state.status)

    state.current = player.other()
    return MoveResult((row, col), state.status)
