"""Pipeline logging: one named logger writing to ``reports/pipeline.log`` and stderr.

The level comes from ``LOG_LEVEL`` (``DEBUG``, ``INFO``, ``WARNING``...) and
defaults to ``INFO``. Calling ``setup_logger`` twice for the same name returns
the already configured logger unchanged.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s.%(funcName)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_FILE = "reports/pipeline.log"


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or ``LOG_LEVEL``) to a ``logging`` constant; unknown names give INFO."""
    name = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logger(
    name: str = "morning_report",
    log_file: str = DEFAULT_LOG_FILE,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Return the ``name`` logger with a file handler and a console handler attached.

    Args:
        name (str): Logger name.
        log_file (str): Log file path; its directory is created if missing.
        level (Optional[str]): Level name; ``LOG_LEVEL`` or INFO when omitted.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(level))
    for handler in _build_handlers(Path(log_file)):
        logger.addHandler(handler)
    return logger


def _build_handlers(log_path: Path) -> List[logging.Handler]:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [
        logging.FileHandler(log_path, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


logger = setup_logger()
