from __future__ import annotations

from typing import Dict, Iterable

import pandas as pd


OUTCOMES = ["HUMAN", "COMPUTER", "DRAW"]

RECORD_COLS = [
    "game", "winner", "moves",
    "last_row", "last_col", "direction",
    "legacy_missed", "legacy_extra", "legacy_agrees",
    "scan_agrees",
]


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def to_frame(records: Iterable[Dict[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(list(records), columns=RECORD_COLS)
    for c in ["game", "moves", "last_row", "last_col", "legacy_missed", "legacy_extra"]:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    for c in ["legacy_agrees", "scan_agrees"]:
        df[c] = df[c].astype(bool)
    return df


def outcome_table(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["winner", "moves"])

    counts = df["winner"].value_counts().reindex(OUTCOMES, fill_value=0)
    total = int(counts.sum())
    out = pd.DataFrame({"outcome": OUTCOMES, "games": counts.values})
    out["rate"] = out["games"] / total if total else 0.0
    out["avg_moves"] = [
        float(df.loc[df["winner"] == o, "moves"].mean()) if counts[o] else float("nan")
        for o in OUTCOMES
    ]
    return out


def direction_table(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["direction"])
    wins = df[df["direction"] != "none"]
    out = wins["direction"].value_counts().rename_axis("direction").reset_index(name="games")
    return out.sort_values(["games", "direction"], ascending=[False, True]).reset_index(drop=True)


def detector_agreement(df: pd.DataFrame) -> Dict[str, float]:
    """How often the fixed-offset detector disagreed with the exhaustive one."""
    _require_cols(df, ["legacy_missed", "legacy_extra", "legacy_agrees", "scan_agrees", "direction", "last_row"])

    games = len(df)
    disagree = df[~df["legacy_agrees"]]
    return {
        "games": games,
        "agreeing_games": int(df["legacy_agrees"].sum()),
        "missed_wins": int(df["legacy_missed"].sum()),
        "extra_wins": int(df["legacy_extra"].sum()),
        "disagreement_rate": (len(disagree) / games) if games else 0.0,
        "missed_diag_row2": int(
            ((disagree["last_row"] == 2) & disagree["direction"].str.startswith("diag")).sum()
        ),
        "scan_mismatches": int((~df["scan_agrees"]).sum()),
    }


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number").drop(columns=["game"], errors="ignore")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
