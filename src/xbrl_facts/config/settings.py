# src/xbrl_facts/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL Facts Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the XBRL fact extraction library and
    its CLI. Only the CLI and application entry points read the process
    environment; the domain receives plain values (e.g., a NamingPolicy).

Design:
    - Pydantic v2 BaseSettings with an ``XBRL_`` env prefix.
    - Explicit field declarations with constrained types and ranges.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_DEFAULT_MAX_DOCUMENT_BYTES = 512 * 1024 * 1024


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for XBRL fact extraction."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level used by configure_root_logging().",
        validation_alias=AliasChoices("XBRL_LOG_LEVEL", "LOG_LEVEL"),
    )

    strip_dimension_suffixes: bool = Field(
        default=False,
        description=(
            "Strip conventional 'Axis'/'Member' suffixes from segment dimension and "
            "member names in addition to namespace prefixes."
        ),
    )

    max_document_bytes: int = Field(
        default=_DEFAULT_MAX_DOCUMENT_BYTES,
        ge=1,
        description="Largest document (in UTF-8 bytes) accepted by parse().",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus counters for parsed documents and facts.",
    )

    model_config = SettingsConfigDict(
        env_prefix="XBRL_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Upper-case and validate the log level name."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid XBRL configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.debug(
        "Settings initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "strip_dimension_suffixes": settings.strip_dimension_suffixes,
                "max_document_bytes": settings.max_document_bytes,
                "metrics_enabled": settings.metrics_enabled,
            }
        },
    )
    return settings


__all__ = ["Environment", "Settings", "get_settings"]
