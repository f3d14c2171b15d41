from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_outcomes(outcomes: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if outcomes.empty or "outcome" not in outcomes.columns:
        return None

    fig = plt.figure()
    plt.bar(outcomes["outcome"].astype(str), outcomes["games"].astype(int))
    plt.title("Outcomes (random vs random)")
    plt.xlabel("outcome")
    plt.ylabel("games")
    return _finish(fig, outdir, "outcomes.png", show)


def plot_game_lengths(df: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if "moves" not in df.columns or df["moves"].dropna().empty:
        return None

    fig = plt.figure()
    # 35 cells, so at most 35 moves
    plt.hist(df["moves"].dropna(), bins=range(1, 37))
    plt.title("Histogram: moves per game")
    plt.xlabel("moves")
    plt.ylabel("count")
    return _finish(fig, outdir, "hist_moves.png", show)


def plot_directions(directions: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if directions.empty:
        return None

    fig = plt.figure()
    plt.bar(directions["direction"].astype(str), directions["games"].astype(int))
    plt.title("Winning line direction")
    plt.xlabel("direction")
    plt.ylabel("games")
    return _finish(fig, outdir, "directions.png", show)
