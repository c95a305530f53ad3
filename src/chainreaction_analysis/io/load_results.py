from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "game", "move", "player", "row", "col",
    "topples", "cells_exploded", "total_dots",
    "owned_by_mover", "owned_cells", "ms",
]

NUMERIC_COLS = [c for c in DEFAULT_EXPECTED_COLS if c != "player"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in ("game", "move", "player", "topples") if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)

    df["player"] = df["player"].astype(str).str.strip().str.lower()
    df = df.dropna(subset=["game", "move", "topples"]).copy()

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "selfplay_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
