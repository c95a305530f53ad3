"""
Headless random self-play.

Plays games between four random agents and records one CSV row per accepted
move with the cascade it caused. The output feeds `chainreaction_analysis`.
"""

from __future__ import annotations

import argparse
import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from chainreaction.ai.random_agent import RandomAgent
from chainreaction.config import COLS, DISCIPLINE, ROWS
from chainreaction.core.propagation import DISCIPLINES
from chainreaction.errors import InvariantViolation
from chainreaction.game.engine import Engine
from chainreaction.log import setup_logging
from chainreaction.types import TURN_ORDER

logger = logging.getLogger(__name__)

FIELDS = [
    "game", "move", "player", "row", "col",
    "topples", "cells_exploded", "total_dots",
    "owned_by_mover", "owned_cells", "ms",
]


def play_headless(
    game_id: int,
    *,
    rows: int = ROWS,
    cols: int = COLS,
    moves: int = 40,
    discipline: str = DISCIPLINE,
    seed: int = 0,
) -> List[Dict[str, object]]:
    """
    One game, `moves` accepted moves long (or shorter if it stalls).
    Seeds are derived from `seed` and the seat so games are reproducible.
    """
    engine = Engine(rows, cols, discipline=discipline)  # type: ignore[arg-type]
    seats = {p: RandomAgent(seed=seed * 1009 + game_id * 31 + i) for i, p in enumerate(TURN_ORDER)}
    out: List[Dict[str, object]] = []

    while engine.moves_played < moves:
        mover = engine.current_player()
        try:
            r, c = seats[mover].choose_move(engine.state)
        except ValueError:
            logger.info("game %d: %s has no legal move after %d moves", game_id, mover, engine.moves_played)
            break

        t0 = time.perf_counter()
        try:
            result = engine.play(r, c)
        except InvariantViolation as e:
            logger.warning("game %d stopped at move %d: %s", game_id, engine.moves_played + 1, e)
            break
        ms = (time.perf_counter() - t0) * 1000.0

        if result is None:
            # legal_moves only offers cells the mover can take
            raise InvariantViolation(f"game {game_id}: agent offered illegal move ({r}, {c})")

        owned = engine.grid.owned_counts()
        out.append({
            "game": game_id,
            "move": engine.moves_played,
            "player": mover.value,
            "row": r,
            "col": c,
            "topples": len(result.topples),
            "cells_exploded": result.cells_exploded,
            "total_dots": engine.grid.total_dots(),
            "owned_by_mover": owned.get(mover, 0),
            "owned_cells": sum(owned.values()),
            "ms": round(ms, 4),
        })

    return out


def _play_batch(args) -> List[Dict[str, object]]:
    game_ids, kwargs = args
    rows: List[Dict[str, object]] = []
    for g in game_ids:
        rows.extend(play_headless(g, **kwargs))
    return rows


def chunked(lst: Sequence[int], size: int):
    for i in range(0, len(lst), size):
        yield list(lst[i:i + size])


def run_selfplay(
    games: int,
    *,
    rows: int = ROWS,
    cols: int = COLS,
    moves: int = 40,
    discipline: str = DISCIPLINE,
    seed: int = 0,
    workers: int = 1,
) -> List[Dict[str, object]]:
    kwargs = dict(rows=rows, cols=cols, moves=moves, discipline=discipline, seed=seed)
    ids = list(range(1, games + 1))

    if workers <= 1:
        return _play_batch((ids, kwargs))

    records: List[Dict[str, object]] = []
    batch = max(1, games // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers) as ex:
        futs = [ex.submit(_play_batch, (chunk, kwargs)) for chunk in chunked(ids, batch)]
        for fut in as_completed(futs):
            records.extend(fut.result())

    records.sort(key=lambda rec: (rec["game"], rec["move"]))
    return records


def write_csv(records: Sequence[Dict[str, object]], out_dir: Path, stamp: Optional[str] = None) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = stamp or time.strftime("%Y%m%d_%H%M%S")
    path = out_dir / f"selfplay_{stamp}.csv"
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(records)
    return path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Random self-play; writes per-move cascade stats to CSV.")
    ap.add_argument("--games", type=int, default=50, help="Number of games to play")
    ap.add_argument("--moves", type=int, default=40, help="Accepted moves per game")
    ap.add_argument("--rows", type=int, default=ROWS)
    ap.add_argument("--cols", type=int, default=COLS)
    ap.add_argument("--discipline", choices=DISCIPLINES, default=DISCIPLINE, help="Cascade worklist order")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=1, help=f"Process workers (cpu cores here: {os.cpu_count()})")
    ap.add_argument("--out", type=str, default="data/results", help="Directory for selfplay_*.csv")
    ap.add_argument("--log-level", type=str, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    start = time.perf_counter()
    records = run_selfplay(
        args.games,
        rows=args.rows,
        cols=args.cols,
        moves=args.moves,
        discipline=args.discipline,
        seed=args.seed,
        workers=args.workers,
    )
    path = write_csv(records, Path(args.out))
    elapsed = time.perf_counter() - start

    logger.info("played %d games (%d moves) in %.2fs", args.games, len(records), elapsed)
    print(f"Wrote {len(records)} rows to: {path.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
