"""Configuration loading for flyer-sync.

Reads settings from environment variables (with .env support via python-dotenv)
and validates that all required values are present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from flyer_sync.gemini import DEFAULT_MODEL
from flyer_sync.transport import DEFAULT_MAX_ATTEMPTS


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        gemini_api_key: API key for Google Gemini.
        page_proxy_url: URL of the page-creation proxy endpoint.
        gemini_model: Gemini model identifier.
        log_level: Logging level (default ``"INFO"``).
        contacts_path: Optional JSON contact list used for descriptions.
        max_attempts: Attempts per HTTP request (default ``3``).
    """

    gemini_api_key: str
    page_proxy_url: str
    gemini_model: str = DEFAULT_MODEL
    log_level: str = "INFO"
    contacts_path: Path | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __repr__(self) -> str:
        return (
            f"Settings(gemini_api_key='***', "
            f"page_proxy_url={self.page_proxy_url!r}, "
            f"gemini_model={self.gemini_model!r}, "
            f"log_level={self.log_level!r}, "
            f"contacts_path={self.contacts_path!r}, "
            f"max_attempts={self.max_attempts!r})"
        )


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any required environment variable is missing,
            empty, or whitespace-only (the message names **all** missing
            variables), or if ``MAX_ATTEMPTS`` is not a positive integer.
    """
    load_dotenv()

    required = {
        "GEMINI_API_KEY": "gemini_api_key",
        "PAGE_PROXY_URL": "page_proxy_url",
    }

    values: dict = {}
    missing: list[str] = []

    for env_var, field_name in required.items():
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            missing.append(env_var)
        else:
            values[field_name] = raw.strip()

    if missing:
        names = ", ".join(missing)
        raise ConfigError(f"Missing required environment variables: {names}")

    # Optional settings with defaults handled by the dataclass.
    model = os.environ.get("GEMINI_MODEL", "").strip()
    log_level = os.environ.get("LOG_LEVEL", "").strip()
    contacts_path = os.environ.get("CONTACTS_PATH", "").strip()
    max_attempts = os.environ.get("MAX_ATTEMPTS", "").strip()

    if model:
        values["gemini_model"] = model
    if log_level:
        values["log_level"] = log_level
    if contacts_path:
        values["contacts_path"] = Path(contacts_path)
    if max_attempts:
        values["max_attempts"] = _parse_max_attempts(max_attempts)

    return Settings(**values)


def _parse_max_attempts(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"MAX_ATTEMPTS must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"MAX_ATTEMPTS must be at least 1, got {value}")
    return value
