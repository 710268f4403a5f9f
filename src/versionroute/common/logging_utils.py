"""Logging helpers shared by the dispatcher, server and CLI.

Keeps log setup in one place and provides a small structured-context helper
so DEBUG traces carry consistent fields (event, component, outcome, ...).
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from ..constants import Constants


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once.

    The level comes from the ``level`` argument, then the
    ``VERSIONROUTE_LOG_LEVEL`` environment variable, then INFO.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    None values are dropped so records only carry meaningful fields.
    """
    return {key: value for key, value in fields.items() if value is not None}
