from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, name: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        fig.savefig(outdir / name, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> None:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    if not num_cols:
        return

    if not show:
        _ensure_dir(outdir)

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        _finish(fig, outdir, f"hist_{c}.png", show=show)


def plot_cascade_growth(by_move: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> None:
    """Mean and max cascade size against move number."""
    if by_move.empty or "move" not in by_move.columns:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(10, 5))
    plt.plot(by_move["move"], by_move["mean"], label="mean")
    plt.plot(by_move["move"], by_move["max"], label="max", alpha=0.6)
    plt.title(f"{metric} by move")
    plt.xlabel("move")
    plt.ylabel(metric)
    plt.legend()
    _finish(fig, outdir, f"growth_{metric}.png", show=show)


def plot_player_bar(summary: pd.DataFrame, outdir: Path, column: str, *, show: bool) -> None:
    if "player" not in summary.columns or column not in summary.columns:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    plt.bar(summary["player"].astype(str), summary[column].astype(float))
    plt.title(f"{column} by player")
    plt.xlabel("player")
    plt.ylabel(column)
    _finish(fig, outdir, f"player_{column}.png", show=show)
