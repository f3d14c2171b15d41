from .chart import (
    plot_directions,
    plot_game_lengths,
    plot_outcomes,
)

__all__ = [
    "plot_directions",
    "plot_game_lengths",
    "plot_outcomes",
]
