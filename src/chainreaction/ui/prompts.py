from __future__ import annotations
from typing import Optional

from chainreaction.types import Coord


def parse_move(raw: str, rows: int, cols: int) -> Optional[Coord]:
    """
    Parse "row col" (1-based, space or comma separated) into a 0-based coord.
    Returns None when the user wants to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter row and column (e.g. 2 3) or q.")
    row, col = int(parts[0]) - 1, int(parts[1]) - 1
    if row < 0 or row >= rows:
        raise ValueError(f"Row must be between 1 and {rows}.")
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return row, col
