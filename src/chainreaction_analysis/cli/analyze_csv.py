from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, cascade_by_move, numeric_summary, player_summary, top_cascades
from ..plots.chart import plot_cascade_growth, plot_histograms, plot_player_bar


DEFAULT_NUMERIC_PLOTS = [
    "topples",
    "cells_exploded",
    "total_dots",
    "owned_by_mover",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze chain reaction self-play CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_*.csv")
    ap.add_argument("--pattern", type=str, default="selfplay_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--top", type=int, default=10, help="Top N biggest cascades to list")
    ap.add_argument("--metric", type=str, default="topples", help="Cascade metric (topples, cells_exploded, owned_by_mover, ...)")
    ap.add_argument("--min-move", type=int, default=0, help="Ignore moves before this move number")

    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Games: {df['game'].nunique()}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_move=args.min_move,
    )

    players = player_summary(df, cfg)
    print("\n=== Per player ===")
    print(players.to_string(index=False))

    print(f"\n=== Top {cfg.top_n} cascades by {cfg.metric} ===")
    print(top_cascades(df, cfg).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    plot_histograms(df, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)
    plot_cascade_growth(cascade_by_move(df, cfg.metric), outdir, cfg.metric, show=args.show)
    plot_player_bar(players, outdir, "explosion_rate", show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
