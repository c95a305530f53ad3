from __future__ import annotations
from chainreaction.config import USE_COLOR
from chainreaction.types import Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PLAYER_FG = {
    Player.RED: FG_RED,
    Player.GREEN: FG_GREEN,
    Player.BLUE: FG_BLUE,
    Player.YELLOW: FG_YELLOW,
}


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def player_label(p: Player) -> str:
    return c(str(p), PLAYER_FG[p])
