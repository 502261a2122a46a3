"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bonsai_wire.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.wire_indent is None
    assert settings.strict_decoding is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BONSAI_WIRE_WIRE_INDENT", "4")
    monkeypatch.setenv("BONSAI_WIRE_STRICT_DECODING", "false")
    settings = get_settings()
    assert settings.wire_indent == 4
    assert settings.strict_decoding is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_negative_indent_rejected():
    with pytest.raises(ValidationError):
        Settings(wire_indent=-1)
