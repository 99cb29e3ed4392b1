"""
Logging setup for wordletui.

Modules log through `logging.getLogger(__name__)`; this module only decides
where records go. Game events land in a dated file under `log_dir`. A console
handler for warnings and errors is optional, because the curses screen owns
the terminal while a game is running.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

ROOT_LOGGER = "wordletui"


def configure_logging(log_dir: str | Path = "logs", level: str | int = "INFO",
                      console: bool = False) -> logging.Logger:
    """
    Attach a file handler (and optionally a console handler) to the package
    logger and return it. Calling it again replaces the previous handlers.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level if isinstance(level, int) else level.upper())

    # Prevent duplicate handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    log_file = log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    return logger
