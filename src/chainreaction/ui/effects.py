from __future__ import annotations
import sys
import time
from typing import Optional, TextIO

from chainreaction.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

# A dot swelling up until it pops
FRAMES = ("·", "∙", "•", "●", "*")


def ai_thinking(
    label: str = "AI is thinking",
    delay: Optional[float] = None,
    *,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Short pause before an agent's move so the board change is readable.
    Draws a growing-dot spinner on one line, then wipes it.
    """
    secs = AI_THINK_DELAY_SEC if delay is None else delay
    if secs <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(secs)
        return

    out = stream or sys.stdout
    deadline = time.monotonic() + secs
    frame = 0
    while time.monotonic() < deadline:
        out.write(f"\r{label} {FRAMES[frame % len(FRAMES)]}")
        out.flush()
        time.sleep(min(0.1, secs))
        frame += 1
    out.write("\r" + " " * (len(label) + 2) + "\r")
    out.flush()
