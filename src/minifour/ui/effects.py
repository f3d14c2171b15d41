from __future__ import annotations
import sys
import time
from typing import Callable, Optional

from minifour import config


def ai_thinking(
    label: str = "Computer is thinking",
    delay: Optional[float] = None,
    sleep_fn: Callable[[float], None] = time.sleep,
) -> None:
    """
    Small user-visible delay + optional spinner so computer moves are not instant.
    Blocking; pass a no-op sleep_fn to skip the wait.
    """
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        sleep_fn(delay)
        return

    frames = ["|", "/", "-", "\\"]
    step = 0.08
    ticks = max(1, round(delay / step))
    for i in range(ticks):
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        sleep_fn(step)
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
