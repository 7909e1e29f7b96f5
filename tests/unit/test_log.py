"""Tests for flyer-sync logging setup."""

from __future__ import annotations

import logging

import pytest

from flyer_sync.log import setup_logging


def _our_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers if getattr(h, "_flyer_sync_log_handler", False)
    ]


class TestSetupLogging:
    def test_sets_root_level(self) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_idempotent(self) -> None:
        setup_logging("INFO")
        setup_logging("WARNING")

        handlers = _our_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_format(self) -> None:
        setup_logging("INFO")
        formatter = _our_handlers()[0].formatter
        record = logging.LogRecord("flyer_sync.test", logging.INFO, "", 0, "hello", None, None)

        line = formatter.format(record)

        assert " | INFO     | flyer_sync.test | hello" in line

    def test_lowercase_level_accepted(self) -> None:
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("LOUD")

    def test_urllib3_quiet_unless_debug(self) -> None:
        setup_logging("INFO")
        assert logging.getLogger("urllib3").level == logging.WARNING

        setup_logging("DEBUG")
        assert logging.getLogger("urllib3").level == logging.DEBUG
