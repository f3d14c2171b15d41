from __future__ import annotations
import logging
import random
from typing import Callable, List, Optional

from minifour.ai.base import Agent
from minifour.errors import PlacementError
from minifour.game.actions import apply_move
from minifour.game.results import final_message, outcome_label
from minifour.game.state import GameState, new_game
from minifour.types import Player
from minifour.ui.comments import random_comment
from minifour.ui.effects import ai_thinking
from minifour.ui.prompts import ask_play_again
from minifour.ui.render import banner, render

log = logging.getLogger(__name__)


def run_game(
    human: Agent,
    computer: Agent,
    show_thinking: bool = True,
    rng: Optional[random.Random] = None,
    think: Callable[[str], None] = ai_thinking,
) -> GameState:
    """
    Play one game to a win or a draw, human first. Returns the finished state.

    A rejected column leaves the board as it was and the same player is asked again.
    """
    state = new_game()
    log.info("New game: %s vs %s", human.name, computer.name)

    while not state.is_over:
        render(state.board, state.last_status)

        player = state.current
        agent = human if player is Player.HUMAN else computer

        if player is Player.COMPUTER and show_thinking:
            think(f"{agent.name} is thinking")

        move = agent.choose_move(state)
        try:
            apply_move(state, move)
        except PlacementError as e:
            state.last_status = str(e)
            continue

        if state.is_over:
            break
        if player is Player.COMPUTER:
            state.last_status = f"{agent.name} chose {int(move)}. {random_comment(rng)}"
        else:
            state.last_status = f"You chose {int(move)}."

    log.info("Game over: %s in %d moves", outcome_label(state), state.moves_played)
    render(state.board, final_message(state), highlight=state.winning_line)
    return state


def play_session(
    make_human: Callable[[], Agent],
    make_computer: Callable[[], Agent],
    ask_replay: Callable[[], bool] = ask_play_again,
    show_thinking: bool = True,
    rng: Optional[random.Random] = None,
    think: Callable[[str], None] = ai_thinking,
) -> List[GameState]:
    """Keep playing fresh games until ask_replay() says no."""
    finished: List[GameState] = []
    while True:
        banner()
        finished.append(
            run_game(make_human(), make_computer(), show_thinking=show_thinking, rng=rng, think=think)
        )
        if not ask_replay():
            return finished
