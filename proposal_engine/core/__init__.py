"""Core module - Configuration, logging and date helpers."""

from proposal_engine.core.config import get_settings, Settings
from proposal_engine.core.logging_config import setup_logging
from proposal_engine.core.dates import utcnow, to_datetime

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "utcnow",
    "to_datetime",
]
