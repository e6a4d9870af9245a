# src/xbrl_facts/application/schemas/dto/xbrl_facts.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL fact DTOs.

Purpose:
    Serializable mirror of the resolved fact model. Field aliases match the
    external key names (``startDate``, ``endDate``) and optional fields are
    ``None`` so that renderers can omit them with ``exclude_none``.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from xbrl_facts.application.schemas.dto.base import BaseDTO


class PeriodDTO(BaseDTO):
    """Reporting period; either ``instant`` or ``startDate``/``endDate``."""

    instant: str | None = None
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")


class SegmentDTO(BaseDTO):
    """Dimension/member pair."""

    dimension: str
    member: str


class ContextDTO(BaseDTO):
    """Reporting context embedded in every fact."""

    entity: str
    segments: list[SegmentDTO] = Field(default_factory=list)
    period: PeriodDTO


class FactDTO(BaseDTO):
    """Single fact.

    Attributes:
        value:
            Native JSON value. Strict types keep ``True``, ``1`` and ``1.0``
            from being coerced into one another during validation.
    """

    context: ContextDTO
    concept: str
    value: StrictBool | StrictInt | StrictFloat | str
    decimals: str | None = None
    unit: str | None = None


class FactSetDTO(BaseDTO):
    """Top-level document: ``{"facts": [...]}``."""

    facts: list[FactDTO] = Field(default_factory=list)


__all__ = ["PeriodDTO", "SegmentDTO", "ContextDTO", "FactDTO", "FactSetDTO"]
