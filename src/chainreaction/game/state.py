from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from chainreaction.core.grid import Grid
from chainreaction.game.actions import MoveResult
from chainreaction.types import Coord, Player


@dataclass(slots=True)
class GameState:
    grid: Grid
    current: Player
    last_move: Optional[Coord] = None
    last_result: Optional[MoveResult] = None
    moves_played: int = 0
    last_status: str = "Red starts."
