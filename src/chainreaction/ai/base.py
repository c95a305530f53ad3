from __future__ import annotations
from typing import Protocol

from chainreaction.game.state import GameState
from chainreaction.types import Coord


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Coord:
        ...
