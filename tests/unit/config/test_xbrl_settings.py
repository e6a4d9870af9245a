# tests/unit/config/test_xbrl_settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT

from __future__ import annotations

import pytest
from pydantic import ValidationError

from xbrl_facts.config.settings import Environment, Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "XBRL_ENVIRONMENT",
        "XBRL_STRIP_DIMENSION_SUFFIXES",
        "XBRL_MAX_DOCUMENT_BYTES",
        "XBRL_METRICS_ENABLED",
        "XBRL_LOG_LEVEL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.strip_dimension_suffixes is False
    assert settings.max_document_bytes == 512 * 1024 * 1024
    assert settings.metrics_enabled is True
    assert settings.log_level == "INFO"


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XBRL_ENVIRONMENT", "test")
    monkeypatch.setenv("XBRL_STRIP_DIMENSION_SUFFIXES", "true")
    monkeypatch.setenv("XBRL_MAX_DOCUMENT_BYTES", "2048")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("XBRL_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.environment is Environment.TEST
    assert settings.strip_dimension_suffixes is True
    assert settings.max_document_bytes == 2048
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def test_settings_reject_invalid_values() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_document_bytes=0)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_get_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XBRL_MAX_DOCUMENT_BYTES", "-1")

    with pytest.raises(RuntimeError):
        get_settings()
