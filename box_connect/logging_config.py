from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_LEVEL_ENV = "BOX_CONNECT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name (or $BOX_CONNECT_LOG_LEVEL) to a logging level; default WARNING."""

    raw = name if name is not None else os.environ.get(LOG_LEVEL_ENV, "")
    level = logging.getLevelName(raw.strip().upper()) if raw.strip() else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, log_level: int = logging.WARNING, stream: TextIO | None = None) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(handler)
