from __future__ import annotations

import sys

from .cli.simulate import main as simulate_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: simulate if no subcommand
    if not argv:
        return simulate_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"simulate", "sim", "selfplay"}:
        return simulate_main(rest)

    # Bare flags go straight to simulate
    if cmd.startswith("-"):
        return simulate_main(argv)

    print("Usage:")
    print("  python -m minifour_analysis simulate [--games N] [--seed S] [--outdir figures] [--show]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
