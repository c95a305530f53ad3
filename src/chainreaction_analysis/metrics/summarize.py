from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "topples",
    "cells_exploded",
    "owned_by_mover",
    "total_dots",
    "ms",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "topples"
    top_n: int = 10
    # Ignore the opening moves, which almost never explode
    min_move: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.min_move > 0:
        _require_cols(out, ["move"])
        out = out[out["move"] >= cfg.min_move].copy()
    return out


def player_summary(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """One row per player: move count, explosion rate, mean/max of the metric."""
    _require_cols(df, ["player", "topples", cfg.metric])
    out = filter_rows(df, cfg)

    g = out.groupby("player")
    table = pd.DataFrame({
        "moves": g.size(),
        "explosion_rate": g["topples"].apply(lambda s: float((s > 0).mean())),
        f"mean_{cfg.metric}": g[cfg.metric].mean(),
        f"max_{cfg.metric}": g[cfg.metric].max(),
    })
    return table.sort_values(f"mean_{cfg.metric}", ascending=False).reset_index()


def cascade_by_move(df: pd.DataFrame, metric: str = "topples") -> pd.DataFrame:
    """Mean/max of `metric` at each move index across all games."""
    _require_cols(df, ["move", metric])
    g = df.groupby("move")[metric]
    return pd.DataFrame({"mean": g.mean(), "max": g.max(), "games": g.size()}).reset_index()


def top_cascades(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["game", "move", "player", cfg.metric])

    out = filter_rows(df, cfg)
    out = out.sort_values([cfg.metric, "game", "move"], ascending=[False, True, True])

    cols = ["game", "move", "player", "row", "col", "topples", "cells_exploded", "total_dots", "owned_by_mover"]
    keep = [c for c in cols if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
