"""Loguru sinks for the shelf service."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}"


def setup_logger(log_dir: Optional[Path] = None, debug: bool = False) -> None:
    """Console sink, plus ``<log_dir>/galshelf.log`` when a directory is given."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO", format=_FORMAT)

    if log_dir is None:
        return
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    # session callbacks log from the launcher's wait threads
    logger.add(log_dir / "galshelf.log", level="DEBUG", format=_FORMAT,
               rotation="5 MB", retention=3, encoding="utf-8", enqueue=True)
