from __future__ import annotations
import random
from typing import Optional

COMMENTS = [
    "The computer played a beautiful move. How will you stop it?",
    "Well played!",
    "Keep up the good work!",
    "Oh, bold move.",
    "Are you sure that was the right move?",
    "You got this.",
    "Nice move!",
    "I think a 2-year-old would have made a better move there...",
    "You're getting closer to your inevitable win. Am I talking to you or the computer... you'll never know ;-)",
]


def random_comment(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(COMMENTS)
