from __future__ import annotations

import argparse
import random

from minifour import config
from minifour.ai.random_agent import RandomAgent
from minifour.errors import QuitGame
from minifour.game.controller import play_session
from minifour.log import setup_logging
from minifour.ui.human import ConsoleHuman


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="minifour", description="Play Connect 4 on a 5x7 board against a random computer.")
    ap.add_argument("--seed", type=int, default=None, help="Seed the computer's move choices and comments")
    ap.add_argument("--no-color", action="store_true", help="Plain output without ANSI colours")
    ap.add_argument("--clear", action="store_true", help="Clear the screen before each board")
    ap.add_argument("--think-delay", type=float, default=config.AI_THINK_DELAY_SEC,
                    help="Seconds the computer pauses before moving (0 disables)")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    setup_logging(args.log_level, config.LOG_FORMAT)
    config.USE_COLOR = config.USE_COLOR and not args.no_color
    config.CLEAR_SCREEN = config.CLEAR_SCREEN or args.clear
    config.AI_THINK_DELAY_SEC = args.think_delay

    rng = random.Random(args.seed)

    try:
        play_session(ConsoleHuman, lambda: RandomAgent(rng), rng=rng)
    except (QuitGame, KeyboardInterrupt, EOFError):
        print()
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
