"""Logging setup for applications embedding the proposal engine."""

import logging
import sys
from typing import Optional

from proposal_engine.core.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure application logging.

    Installs a single stdout handler on the root logger. Calling it again
    does not stack duplicate handlers.

    Args:
        settings: Settings to read DEBUG from (defaults to cached settings)

    Returns:
        Logger for the engine package
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.DEBUG else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if getattr(handler, "_proposal_engine", False):
            handler.setLevel(level)
            break
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        console_handler._proposal_engine = True
        root_logger.addHandler(console_handler)

    return logging.getLogger("proposal_engine")
