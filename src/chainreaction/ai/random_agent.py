from __future__ import annotations
import random

from chainreaction.game.actions import legal_moves
from chainreaction.game.state import GameState
from chainreaction.types import Coord


class RandomAgent:
    name = "Random AI"

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def choose_move(self, state: GameState) -> Coord:
        moves = legal_moves(state.grid, state.current)
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
