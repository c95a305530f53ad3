from __future__ import annotations
from typing import Iterable, List, Optional, Set

from chainreaction.config import CLEAR_SCREEN
from chainreaction.core.cell import Cell
from chainreaction.core.grid import Grid
from chainreaction.types import Coord
from chainreaction.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, PLAYER_FG, REVERSE, player_label


def _dots(cell: Cell) -> str:
    if cell.is_empty():
        return c("·", FG_GRAY)
    return c(str(cell.dot_count), PLAYER_FG[cell.owner])


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_board(
    grid: Grid,
    *,
    last_move: Optional[Coord] = None,
    exploded: Optional[Iterable[Coord]] = None,
) -> List[str]:
    boom: Set[Coord] = set(exploded) if exploded else set()

    lines = [c("    " + " ".join(str(i + 1) for i in range(grid.cols)), DIM)]
    for r in range(grid.rows):
        parts = []
        for col in range(grid.cols):
            p = _dots(grid.get(r, col))
            if (r, col) == last_move:
                p = f"{REVERSE}{p}\033[0m"
            elif (r, col) in boom:
                p = c("*", BOLD) if grid.get(r, col).owner is None else c(p, BOLD)
            parts.append(p)
        lines.append(f"{r + 1:>2} | " + " ".join(parts) + " |")
    lines.append(c("     " + "—" * (2 * grid.cols - 1), DIM))
    return lines


def render(
    grid: Grid,
    status: str = "",
    *,
    last_move: Optional[Coord] = None,
    exploded: Optional[Iterable[Coord]] = None,
) -> None:
    clear_screen()

    print(c("CHAIN REACTION", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in format_board(grid, last_move=last_move, exploded=exploded):
        print(line)

    owned = grid.owned_counts()
    if owned:
        print("   " + "  ".join(f"{player_label(p)}: {n}" for p, n in owned.items()))
    print(c("   Enter row and column to place (e.g. 2 3). Enter q to quit.", DIM))
