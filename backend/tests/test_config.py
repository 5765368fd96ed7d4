"""Tests for runtime settings loading."""

from __future__ import annotations

import os

from core import config
from core.config import Settings, get_settings, set_settings


def test_settings_read_environment():
    settings = Settings()
    assert settings.API_KEY == os.environ["API_KEY"]
    assert settings.API_BASE_URL == os.environ["API_BASE_URL"]
    assert settings.API_TIMEOUT_SECONDS == float(os.environ["API_TIMEOUT_SECONDS"])


def test_set_settings_replaces_active_instance():
    previous = get_settings()
    replacement = Settings(API_KEY="other-key", API_SECRET="other-secret", API_BASE_URL="https://other/")
    try:
        set_settings(replacement)
        assert get_settings() is replacement
    finally:
        set_settings(previous)
    assert get_settings() is previous


def test_module_exports_only_accessors():
    assert config.__all__ == ["Settings", "get_settings", "set_settings"]
    assert not hasattr(config, "settings")
