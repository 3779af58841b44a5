"""Logging setup shared by every layer.

The domain layer only asks for module loggers through `get_logger`; an application embedding it
decides when (and if) to call `setup_logging`.
"""

import logging
import sys
from typing import Optional

from src.core.config import Settings, get_settings


def setup_logging(level: Optional[str] = None, settings: Optional[Settings] = None) -> None:
    """Configure the root logger with a console handler.

    The level falls back to BOWLING_LOG_LEVEL (default INFO) when not given.
    """
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
