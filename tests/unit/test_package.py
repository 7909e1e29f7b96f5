"""Tests for flyer-sync package structure and imports."""

from __future__ import annotations

import re


def test_package_is_importable() -> None:
    import flyer_sync  # noqa: F401


def test_package_version_is_semver() -> None:
    import flyer_sync

    assert re.match(r"^\d+\.\d+\.\d+$", flyer_sync.__version__)


def test_public_api_exports() -> None:
    import flyer_sync

    for name in flyer_sync.__all__:
        assert hasattr(flyer_sync, name), name


def test_config_module_importable() -> None:
    from flyer_sync.config import ConfigError, load_settings  # noqa: F401


def test_logging_module_importable() -> None:
    from flyer_sync.log import setup_logging  # noqa: F401
