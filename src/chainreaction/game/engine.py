from __future__ import annotations

import logging
from typing import List, Optional

from chainreaction.config import COLS, DISCIPLINE, FIRST_PLAYER, ROWS
from chainreaction.core.cell import Cell
from chainreaction.core.grid import Grid, Snapshot, new_grid
from chainreaction.errors import InvariantViolation
from chainreaction.game.actions import MoveResult, legal_moves, play_move
from chainreaction.game.state import GameState
from chainreaction.types import Coord, Discipline, Player

logger = logging.getLogger(__name__)


class Engine:
    """
    Turn controller for one game.

    Owns the grid exclusively. A successful move passes the turn to the next
    player in ring order; a rejected move changes nothing. There is no
    terminal state.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        *,
        first_player: Player = FIRST_PLAYER,
        discipline: Discipline = DISCIPLINE,  # type: ignore[assignment]
    ) -> None:
        self.discipline: Discipline = discipline
        self.state = GameState(
            grid=new_grid(rows, cols),
            current=first_player,
            last_status=f"{first_player} starts.",
        )

    @classmethod
    def new_game(
        cls,
        rows: int = ROWS,
        cols: int = COLS,
        *,
        first_player: Player = FIRST_PLAYER,
        discipline: Discipline = DISCIPLINE,  # type: ignore[assignment]
    ) -> "Engine":
        return cls(rows, cols, first_player=first_player, discipline=discipline)

    # -----------------------------
    # Moves
    # -----------------------------
    def play(self, row: int, col: int, player: Optional[Player] = None) -> Optional[MoveResult]:
        mover = self.state.current if player is None else player
        grid = self.state.grid

        # Raises OutOfBounds before anything is touched.
        grid.cell_at(row, col)

        before = grid.copy()
        try:
            result = play_move(grid, row, col, mover, discipline=self.discipline)
        except InvariantViolation:
            grid.restore(before)
            logger.error("move (%d, %d) by %s broke the board; state restored", row, col, mover)
            raise

        if result is None:
            logger.info("rejected move (%d, %d) by %s: owned by %s",
                        row, col, mover, grid.cell_at(row, col).owner)
            return None

        self.state.last_move = (row, col)
        self.state.last_result = result
        self.state.moves_played += 1
        self.state.current = self.state.current.next()
        return result

    def apply_move(self, row: int, col: int, player: Optional[Player] = None) -> bool:
        return self.play(row, col, player) is not None

    # -----------------------------
    # Read-only queries
    # -----------------------------
    def current_player(self) -> Player:
        return self.state.current

    def get_cell(self, row: int, col: int) -> Cell:
        return self.state.grid.get(row, col)

    def dimensions(self) -> Coord:
        return self.state.grid.dimensions

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def last_move(self) -> Optional[Coord]:
        return self.state.last_move

    @property
    def last_result(self) -> Optional[MoveResult]:
        return self.state.last_result

    @property
    def moves_played(self) -> int:
        return self.state.moves_played

    def snapshot(self) -> Snapshot:
        return self.state.grid.snapshot()

    def legal_moves(self, player: Optional[Player] = None) -> List[Coord]:
        return legal_moves(self.state.grid, self.state.current if player is None else player)
