"""Logging setup for flyer-sync.

All modules log through ``logging.getLogger(__name__)``; this module only
configures the root logger once for the command-line host.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed here so repeated calls reuse it.
_HANDLER_ATTR = "_flyer_sync_log_handler"

# Chatty HTTP libraries are capped at WARNING unless we run at DEBUG.
_NOISY_LOGGERS = ("urllib3",)


def setup_logging(level: str = "INFO") -> None:
    """Send log records at *level* and above to stderr.

    Calling this function again only updates the level of the handler
    installed by the first call.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for name in _NOISY_LOGGERS:
        quiet_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
        logging.getLogger(name).setLevel(quiet_level)

    handler = _installed_handler(root)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
    handler.setLevel(numeric_level)


def _installed_handler(root: logging.Logger) -> logging.Handler | None:
    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            return handler
    return None
