from __future__ import annotations

import logging

from chainreaction.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once for CLI entry points."""
    lvl = LOG_LEVEL if level is None else level
    if isinstance(lvl, str):
        lvl = getattr(logging, lvl.upper(), logging.WARNING)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
