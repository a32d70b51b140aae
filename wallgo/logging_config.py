"""Logging configuration for Wall Go.

Usage:
    from wallgo.logging_config import setup_logging

    logger = setup_logging("wallgo", level="DEBUG")
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import get_log_level

__all__ = [
    "COMPACT_FORMAT",
    "DEFAULT_FORMAT",
    "setup_logging",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # getLevelName returns "Level X" for unknown names
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    name: str = "wallgo",
    level: int | str | None = None,
    log_file: str | Path | None = None,
    console: bool = True,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return the logger ``name``.

    Safe to call repeatedly: handlers are only attached once per target.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt)

    if console and not any(
        type(h) is logging.StreamHandler for h in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file is not None:
        path = Path(log_file).resolve()
        already = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == path
            for h in logger.handlers
        )
        if not already:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger