"""Logging setup for the running app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from chefkiss.config import DEBUG_LOG_PATH, LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str | Path = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send ``chefkiss`` records to the debug log file and to ``textual console``."""
    package_logger = logging.getLogger("chefkiss")
    package_logger.setLevel(level)
    if package_logger.handlers:
        return

    textual_handler = TextualHandler()
    textual_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    package_logger.addHandler(textual_handler)

    path = Path(log_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # The file log is optional; the app runs without it.
        package_logger.warning("debug log unavailable path=%s", path)
        return
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(file_handler)
