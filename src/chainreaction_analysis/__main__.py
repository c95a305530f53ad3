from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main

USAGE = """\
Usage:
  python -m chainreaction_analysis [analyze] [--csv PATH | --results-dir DIR [--pattern GLOB]]
                                   [--metric COL] [--top N] [--min-move N]
                                   [--outdir DIR] [--show] [--no-plots]
  python -m chainreaction_analysis tables [same flags]   (summaries only, no figures)

Reads the per-move CSVs written by chainreaction-selfplay (selfplay_*.csv).
Cascade metrics: topples, cells_exploded, total_dots, owned_by_mover, owned_cells, ms."""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Bare invocation analyzes the newest self-play CSV
    if not argv:
        return analyze_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"analyze", "analysis"}:
        return analyze_main(rest)
    if cmd == "tables":
        return analyze_main([*rest, "--no-plots"])
    if cmd in {"help", "-h", "--help"} and not rest:
        print(USAGE)
        return 0

    if cmd.startswith("-"):
        return analyze_main(argv)

    print(f"Unknown command: {argv[0]}")
    print(USAGE)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
