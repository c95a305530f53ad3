from __future__ import annotations

from chainreaction.types import Coord
from chainreaction.game.state import GameState


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Coord:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
