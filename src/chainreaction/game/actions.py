from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from chainreaction.config import DISCIPLINE
from chainreaction.core.grid import Grid
from chainreaction.core.propagation import propagate
from chainreaction.types import Coord, Discipline, Player


@dataclass(slots=True)
class MoveResult:
    row: int
    col: int
    player: Player
    topples: List[Coord] = field(default_factory=list)

    @property
    def exploded(self) -> bool:
        return bool(self.topples)

    @property
    def cells_exploded(self) -> int:
        return len(set(self.topples))


def play_move(
    grid: Grid,
    row: int,
    col: int,
    player: Player,
    *,
    discipline: Discipline = DISCIPLINE,  # type: ignore[assignment]
) -> Optional[MoveResult]:
    """
    Place one dot for `player` and resolve the cascade.
    Returns None (and touches nothing) if another player owns the cell.
    """
    cell = grid.cell_at(row, col)
    if not cell.can_take(player):
        return None

    cell.add_dot(player)
    topples = propagate(grid, (row, col), player, discipline=discipline)
    return MoveResult(row, col, player, topples)


def apply_move(
    grid: Grid,
    row: int,
    col: int,
    player: Player,
    *,
    discipline: Discipline = DISCIPLINE,  # type: ignore[assignment]
) -> bool:
    return play_move(grid, row, col, player, discipline=discipline) is not None


def legal_moves(grid: Grid, player: Player) -> List[Coord]:
    return [(r, c) for r, c in grid.coords() if grid.cell_at(r, c).can_take(player)]
