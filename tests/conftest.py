"""
Shared pytest fixtures for chain reaction tests.

Board fixtures are function-scoped so every test starts from a fresh grid.
"""

from __future__ import annotations

from typing import Callable

import matplotlib

matplotlib.use("Agg")

import pytest

from chainreaction.core.cell import Cell
from chainreaction.core.grid import Grid, new_grid
from chainreaction.game.engine import Engine
from chainreaction.types import Player


@pytest.fixture
def grid5() -> Grid:
    return new_grid(5, 5)


@pytest.fixture
def engine5() -> Engine:
    return Engine(5, 5, first_player=Player.RED, discipline="fifo")


@pytest.fixture
def put() -> Callable[[Grid, int, int, int, Player], None]:
    """Place `n` dots for `player` at (row, col) without running any cascade."""

    def _put(grid: Grid, row: int, col: int, n: int, player: Player) -> None:
        grid.set(row, col, Cell(n, player if n > 0 else None))

    return _put
