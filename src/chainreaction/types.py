# src/chainreaction/types.py

from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple

Coord = Tuple[int, int]  # (row, col)
Discipline = Literal["fifo", "lifo"]


class Player(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"

    @property
    def color(self) -> str:
        return self.value

    def next(self) -> "Player":
        return _SUCCESSOR[self]

    @classmethod
    def from_name(cls, name: str) -> "Player":
        s = name.strip().lower()
        for p in cls:
            if s in (p.value, p.value[0], p.name.lower()):
                return p
        raise ValueError(f"Unknown player: {name!r}")

    def __str__(self) -> str:
        return self.value.capitalize()


# Fixed turn ring: Red -> Green -> Blue -> Yellow -> Red
_SUCCESSOR = {
    Player.RED: Player.GREEN,
    Player.GREEN: Player.BLUE,
    Player.BLUE: Player.YELLOW,
    Player.YELLOW: Player.RED,
}

TURN_ORDER: Tuple[Player, ...] = (Player.RED, Player.GREEN, Player.BLUE, Player.YELLOW)
