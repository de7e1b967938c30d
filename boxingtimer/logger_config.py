"""Loguru sinks for BoxingTimer."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{name}:{function}:{line} | {message}"
)


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Replace loguru's default sink with a stderr sink at *level* and,
    when *log_file* is given, a rotating file sink that keeps DEBUG."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            rotation="5 MB",
            retention="10 days",
            level="DEBUG",
            format=LOG_FORMAT,
            enqueue=True,
        )
    logger.debug("Logging configured (level={})", level.upper())
