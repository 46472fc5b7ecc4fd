from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "INVENTORY_VIEWER_LOG_FORMAT"
LOG_LEVEL_ENV = "INVENTORY_VIEWER_LOG_LEVEL"

# Chatty third-party loggers; the retry adapter logs every attempt at DEBUG
_QUIET_LOGGERS = ("urllib3", "werkzeug")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the inventory viewer.

    Format: force_format ("json" / "plain"), else INVENTORY_VIEWER_LOG_FORMAT,
    else JSON. Level: the argument, else INVENTORY_VIEWER_LOG_LEVEL, else INFO.

    JSON records carry `timestamp`, `level` and `logger` keys, plus whatever
    the call site passed via `extra=` (source url, version, record counts).
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()

    if format_mode == "plain":
        # Dev mode
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )

    handler.setFormatter(formatter)

    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
