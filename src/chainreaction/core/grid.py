
# src/chainreaction/core/grid.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from chainreaction.config import ROWS, COLS
from chainreaction.core.cell import Cell
from chainreaction.errors import InvariantViolation, OutOfBounds
from chainreaction.types import Coord, Player

Snapshot = Tuple[Tuple[Tuple[int, Optional[Player]], ...], ...]


@dataclass(slots=True)
class Grid:
    rows: int = ROWS
    cols: int = COLS
    cells: List[Cell] = field(default_factory=list)  # row-major

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid needs at least one row and column, got {self.rows}x{self.cols}.")
        if not self.cells:
            self.cells = [Cell() for _ in range(self.rows * self.cols)]
        elif len(self.cells) != self.rows * self.cols:
            raise ValueError("Cell list does not match grid dimensions.")

    @property
    def dimensions(self) -> Coord:
        return self.rows, self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return row * self.cols + col

    def get(self, row: int, col: int) -> Cell:
        return self.cells[self._index(row, col)].copy()

    def set(self, row: int, col: int, cell: Cell) -> None:
        self.cells[self._index(row, col)] = cell.copy()

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Live reference to the stored cell.
        Only the move/propagation code should mutate through this.
        """
        return self.cells[self._index(row, col)]

    def neighbors(self, row: int, col: int) -> List[Coord]:
        self._index(row, col)
        out: List[Coord] = []
        if row > 0:
            out.append((row - 1, col))  # up
        if row + 1 < self.rows:
            out.append((row + 1, col))  # down
        if col > 0:
            out.append((row, col - 1))  # left
        if col + 1 < self.cols:
            out.append((row, col + 1))  # right
        return out

    def capacity(self, row: int, col: int) -> int:
        return len(self.neighbors(row, col))

    def max_capacity(self) -> int:
        return max(self.capacity(r, c) for r, c in self.coords())

    def coords(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [cell.copy() for cell in self.cells])

    def restore(self, other: "Grid") -> None:
        if other.dimensions != self.dimensions:
            raise ValueError("Cannot restore from a grid of different size.")
        self.cells = [cell.copy() for cell in other.cells]

    def snapshot(self) -> Snapshot:
        return tuple(
            tuple(self.cells[r * self.cols + c].as_tuple() for c in range(self.cols))
            for r in range(self.rows)
        )

    def total_dots(self) -> int:
        return sum(cell.dot_count for cell in self.cells)

    def owned_counts(self) -> Dict[Player, int]:
        counts: Dict[Player, int] = {}
        for cell in self.cells:
            if cell.owner is not None:
                counts[cell.owner] = counts.get(cell.owner, 0) + 1
        return counts

    def check_invariants(self) -> None:
        for r, c in self.coords():
            cell = self.cells[r * self.cols + c]
            if not cell.is_consistent():
                raise InvariantViolation(
                    f"Cell ({r}, {c}) has dot_count={cell.dot_count} owner={cell.owner}."
                )
            cap = self.capacity(r, c)
            # Capacity-0 cells (1x1 board) can never explode.
            if cap > 0 and cell.dot_count >= cap:
                raise InvariantViolation(
                    f"Cell ({r}, {c}) left overflowing: {cell.dot_count} >= capacity {cap}."
                )


def new_grid(rows: int = ROWS, cols: int = COLS) -> Grid:
    return Grid(rows, cols)
