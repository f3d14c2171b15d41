from __future__ import annotations

from minifour.game.state import GameState, GameStatus
from minifour.types import Player

WIN_MESSAGE = "Congratulations! Nice win!"
LOSS_MESSAGE = "How unfortunate... you've been beat by the computer!"
DRAW_MESSAGE = "It's a draw, the board is full."


def outcome_label(state: GameState) -> str:
    if state.status is GameStatus.WON and state.winner is not None:
        return state.winner.name
    if state.status is GameStatus.DRAWN:
        return "DRAW"
    return "IN_PROGRESS"


def final_message(state: GameState) -> str:
    if state.status is GameStatus.DRAWN:
        return DRAW_MESSAGE
    if state.winner is Player.HUMAN:
        return WIN_MESSAGE
    if state.winner is Player.COMPUTER:
        return LOSS_MESSAGE
    return ""
