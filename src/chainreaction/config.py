# src/chainreaction/config.py

from __future__ import annotations

from chainreaction.types import Player

ROWS = 5
COLS = 5
FIRST_PLAYER = Player.RED

# Worklist order used to resolve cascades ("fifo" or "lifo").
# The settled board is the same either way; only the topple order differs.
DISCIPLINE = "fifo"

# Hard cap on topples per move. None = derive from board size.
TOPPLE_BOUND = None

# Interactive games have no winner, so they run until quit or this many moves.
MAX_MOVES = None

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
HIGHLIGHT_EXPLOSIONS = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5

# Logging (stderr). Terminal play output stays on stdout.
LOG_LEVEL = "WARNING"
