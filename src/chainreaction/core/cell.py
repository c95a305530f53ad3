# src/chainreaction/core/cell.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from chainreaction.types import Player


@dataclass(slots=True)
class Cell:
    dot_count: int = 0
    owner: Optional[Player] = None

    def is_empty(self) -> bool:
        return self.owner is None

    def can_take(self, player: Player) -> bool:
        """A player may place on an empty cell or a cell they already own."""
        return self.owner is None or self.owner == player

    def add_dot(self, player: Player) -> None:
        # Ownership transfers unconditionally; legality is the caller's job.
        self.owner = player
        self.dot_count += 1

    def reset(self) -> None:
        self.dot_count = 0
        self.owner = None

    def is_consistent(self) -> bool:
        return (self.owner is None) == (self.dot_count == 0) and self.dot_count >= 0

    def copy(self) -> "Cell":
        return Cell(self.dot_count, self.owner)

    def as_tuple(self) -> Tuple[int, Optional[Player]]:
        return self.dot_count, self.owner
