"""
Logging setup — optional file logging for applications embedding autofix.

The library itself only creates module loggers; nothing is attached on import.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

from .config import Config


def setup_logger(log_dir: Optional[str] = None,
                 level: str | int | None = None,
                 config: Optional[Config] = None) -> logging.Logger:
    """Attach a timestamped file handler to the ``autofix`` logger.

    *log_dir* and *level* default to ``config.LOG_DIR`` and
    ``config.LOG_LEVEL``; *config* is loaded with :meth:`Config.load` if
    omitted. Calling it again for the same directory reuses the existing
    handler and only updates the level.
    """
    if log_dir is None or level is None:
        if config is None:
            config = Config.load()
        if log_dir is None:
            log_dir = config.LOG_DIR
        if level is None:
            level = config.LOG_LEVEL

    abs_dir = os.path.abspath(log_dir)
    logger = logging.getLogger("autofix")
    logger.setLevel(level)

    for handler in logger.handlers:
        if (isinstance(handler, logging.FileHandler)
                and os.path.dirname(handler.baseFilename) == abs_dir):
            handler.setLevel(level)
            return logger

    os.makedirs(abs_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(abs_dir, f"autofix_{timestamp}.log")

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"
    ))
    logger.addHandler(fh)

    return logger
