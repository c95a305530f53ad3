from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List, Optional

from chainreaction.config import TOPPLE_BOUND
from chainreaction.core.grid import Grid
from chainreaction.errors import InvariantViolation
from chainreaction.types import Coord, Discipline, Player

logger = logging.getLogger(__name__)

DISCIPLINES = ("fifo", "lifo")


def topple_bound(grid: Grid) -> int:
    if TOPPLE_BOUND is not None:
        return int(TOPPLE_BOUND)
    n = grid.rows * grid.cols
    return n * n * max(1, grid.max_capacity())


def propagate(
    grid: Grid,
    start: Coord,
    player: Player,
    *,
    discipline: Discipline = "fifo",
    on_topple: Optional[Callable[[Coord], None]] = None,
    max_topples: Optional[int] = None,
) -> List[Coord]:
    """
    Resolve a cascade starting at `start` until no cell reaches its capacity.

    Every exploding cell gives up `capacity` dots, one to each neighbour,
    which becomes owned by `player` regardless of who held it before.
    The settled board does not depend on `discipline`; only the order of
    the returned topples does.

    Returns the exploded coordinates in the order they exploded.
    """
    if discipline not in DISCIPLINES:
        raise ValueError(f"Unknown discipline {discipline!r}. Use one of {DISCIPLINES}.")

    bound = topple_bound(grid) if max_topples is None else max_topples
    pop_left = discipline == "fifo"

    work: Deque[Coord] = deque([start])
    topples: List[Coord] = []

    while work:
        r, c = work.popleft() if pop_left else work.pop()
        cell = grid.cell_at(r, c)
        nbrs = grid.neighbors(r, c)
        cap = len(nbrs)

        if cap == 0 or cell.dot_count < cap:
            continue
        if not cell.is_consistent():
            raise InvariantViolation(
                f"Cell ({r}, {c}) has dot_count={cell.dot_count} owner={cell.owner}."
            )

        if len(topples) >= bound:
            raise InvariantViolation(
                f"Cascade from {start} exceeded {bound} topples on a "
                f"{grid.rows}x{grid.cols} grid; board never settled."
            )

        # A queued cell can be hit again before its turn comes up. It gives
        # away exactly `cap` dots per topple and keeps the rest.
        cell.dot_count -= cap
        if cell.dot_count == 0:
            cell.reset()
        elif cell.dot_count >= cap:
            work.append((r, c))
        topples.append((r, c))
        logger.debug("topple %d at (%d, %d) -> %s", len(topples), r, c, nbrs)
        if on_topple is not None:
            on_topple((r, c))

        for nr, nc in nbrs:
            grid.cell_at(nr, nc).add_dot(player)
            work.append((nr, nc))

    if topples:
        logger.debug(
            "cascade from %s by %s settled after %d topples (%s)",
            start, player, len(topples), discipline,
        )
    return topples
