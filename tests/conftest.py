"""Shared fixtures for flyer-sync tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from flyer_sync.models.contact import ContactRecord
from flyer_sync.models.event import EventRecord


@pytest.fixture()
def monkeypatch_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set all required environment variables to valid defaults.

    Also patches ``load_dotenv`` so that a real ``.env`` file on disk does not
    override the test values.

    Returns the dict of variables so tests can inspect or override values.
    """
    monkeypatch.setattr("flyer_sync.config.load_dotenv", lambda *_a, **_kw: None)
    env_vars = {
        "GEMINI_API_KEY": "test-gemini-key-12345",
        "PAGE_PROXY_URL": "https://proxy.example.com/api/notion-event-creator",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    for key in ("GEMINI_MODEL", "LOG_LEVEL", "CONTACTS_PATH", "MAX_ATTEMPTS"):
        monkeypatch.delenv(key, raising=False)
    return env_vars


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all flyer-sync-related environment variables."""
    monkeypatch.setattr("flyer_sync.config.load_dotenv", lambda *_a, **_kw: None)
    for key in (
        "GEMINI_API_KEY",
        "PAGE_PROXY_URL",
        "GEMINI_MODEL",
        "LOG_LEVEL",
        "CONTACTS_PATH",
        "MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def no_sleep() -> Generator[MagicMock, None, None]:
    """Patch the transport's backoff sleep and return the mock."""
    with patch("flyer_sync.transport.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture()
def make_event():
    """Factory for ``Ready to Sync`` event records."""

    def _make(
        main_artist: str = "Dirt Monkey",
        full_lineup: str = "Dirt Monkey, Kompany",
        date: str = "2025-05-01",
        location: str = "Crofoot Ballroom, Pontiac, MI",
    ) -> EventRecord:
        return EventRecord(
            main_artist=main_artist,
            full_lineup=full_lineup,
            date=date,
            location=location,
        )

    return _make


@pytest.fixture()
def sample_contacts() -> list[ContactRecord]:
    return [
        ContactRecord(
            artist="Kompany",
            manager="Jane Doe",
            email="jane@example.com",
            phone="555-0100",
        ),
        ContactRecord(
            artist="Dirt Monkey",
            manager="Sam Smith",
            email="sam@example.com",
            phone="555-0199",
        ),
    ]


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
