from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from minifour.ai.random_agent import RandomAgent
from minifour.core.legacy_rules import has_won_fixed_offset
from minifour.core.rules import check_winner, is_draw
from minifour.game.actions import apply_move
from minifour.game.results import outcome_label
from minifour.game.state import GameStatus, new_game
from minifour.types import Coord, Player


@dataclass
class GameRecord:
    game: int
    winner: str           # "HUMAN" (first seat), "COMPUTER" or "DRAW"
    moves: int
    last_row: int
    last_col: int
    direction: str        # "row", "col", "diag \\", "diag /" or "none"
    legacy_missed: int    # moves where only the exhaustive detector saw a win
    legacy_extra: int     # moves where only the fixed-offset detector saw one
    legacy_agrees: bool
    scan_agrees: bool     # a whole-board scan of the final position names the same result


def line_direction(line: Optional[List[Coord]]) -> str:
    if not line:
        return "none"
    dr = line[1][0] - line[0][0]
    dc = line[1][1] - line[0][1]
    if dr == 0:
        return "row"
    if dc == 0:
        return "col"
    return "diag \\" if dr == dc else "diag /"


def play_headless(game_index: int, seed: int) -> GameRecord:
    """
    One random-vs-random game, no rendering.
    Both detectors are consulted after every placement.
    """
    rng = random.Random(seed)
    agents = {Player.HUMAN: RandomAgent(rng), Player.COMPUTER: RandomAgent(rng)}
    state = new_game()
    missed = extra = 0

    while not state.is_over:
        player = state.current
        res = apply_move(state, agents[player].choose_move(state))

        exhaustive = res.status is GameStatus.WON
        legacy = has_won_fixed_offset(state.board, res.coord[0], res.coord[1], player)
        if exhaustive and not legacy:
            missed += 1
        elif legacy and not exhaustive:
            extra += 1

    row, col = state.last_move if state.last_move else (-1, -1)
    if state.status is GameStatus.DRAWN:
        scan_agrees = is_draw(state.board)
    else:
        scan_agrees = check_winner(state.board) is state.winner

    return GameRecord(
        game=game_index,
        winner=outcome_label(state),
        moves=state.moves_played,
        last_row=row,
        last_col=col,
        direction=line_direction(state.winning_line),
        legacy_missed=missed,
        legacy_extra=extra,
        legacy_agrees=(missed == 0 and extra == 0),
        scan_agrees=scan_agrees,
    )


def simulate_games(num_games: int, seed: int = 0) -> List[Dict[str, object]]:
    if num_games < 0:
        raise ValueError("num_games must be >= 0")
    # deterministic seed per game for reproducibility
    return [asdict(play_headless(i, seed * 1_000_003 + i)) for i in range(num_games)]
