from __future__ import annotations

import argparse
import logging
from pathlib import Path

from minifour.log import setup_logging

from ..metrics.summarize import detector_agreement, direction_table, numeric_summary, outcome_table, to_frame
from ..plots.chart import plot_directions, plot_game_lengths, plot_outcomes
from ..sim.selfplay import simulate_games

log = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="minifour_analysis simulate",
        description="Play random-vs-random games on the 5x7 board and summarize the results.",
    )
    ap.add_argument("--games", type=int, default=1000, help="Number of games to simulate")
    ap.add_argument("--seed", type=int, default=0, help="Base seed (each game derives its own)")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--log-level", type=str, default="WARNING", help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.games < 0:
        ap.error("--games must be >= 0")

    setup_logging(args.log_level)
    log.info("Simulating %d games (seed %d)", args.games, args.seed)

    df = to_frame(simulate_games(args.games, seed=args.seed))
    print(f"\nSimulated: {len(df):,} games (seed {args.seed})")

    outcomes = outcome_table(df)
    print("\n=== Outcomes ===")
    print(outcomes.to_string(index=False))

    directions = direction_table(df)
    if not directions.empty:
        print("\n=== Winning directions ===")
        print(directions.to_string(index=False))

    agreement = detector_agreement(df)
    print("\n=== Exhaustive vs fixed-offset detection ===")
    for k, v in agreement.items():
        print(f"{k:>18}: {v:.3f}" if isinstance(v, float) else f"{k:>18}: {v}")

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_outcomes(outcomes, outdir, show=args.show)
    plot_game_lengths(df, outdir, show=args.show)
    plot_directions(directions, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
