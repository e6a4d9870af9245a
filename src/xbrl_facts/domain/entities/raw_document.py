# src/xbrl_facts/domain/entities/raw_document.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Raw XBRL instance structures.

Purpose:
    Schema-shaped intermediate form produced by the document reader and
    consumed by the fact resolver. Values are carried exactly as declared;
    no semantic interpretation happens at this level.

Layer:
    domain/entities

Notes:
    - Missing attributes are represented as ``None`` (references) or empty
      strings (text content). Validation is deferred to the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawUnit:
    """Declared unit.

    Attributes:
        id:
            Unit identifier (``id`` attribute).
        measure:
            Text of the plain ``measure`` child, if any.
        numerator:
            Measure under ``divide/unitNumerator``, if any.
        denominator:
            Measure under ``divide/unitDenominator``, if any.
    """

    id: str
    measure: str = ""
    numerator: str = ""
    denominator: str = ""


@dataclass(frozen=True)
class RawExplicitMember:
    """Declared ``explicitMember`` entry (dimension attribute + inline value)."""

    dimension: str
    value: str


@dataclass(frozen=True)
class RawSegment:
    """Declared segment (or scenario) block holding explicit members."""

    members: tuple[RawExplicitMember, ...] = ()


@dataclass(frozen=True)
class RawPeriod:
    """Declared period sub-structure; any element may be absent."""

    instant: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass(frozen=True)
class RawContext:
    """Declared context.

    Attributes:
        id:
            Context identifier (``id`` attribute).
        entity:
            Text of ``entity/identifier``.
        period:
            Period sub-structure.
        segments:
            Segment blocks in declaration order.
    """

    id: str
    entity: str
    period: RawPeriod
    segments: tuple[RawSegment, ...] = ()


@dataclass(frozen=True)
class RawFact:
    """Candidate fact element.

    Attributes:
        name:
            Local element name.
        context_ref:
            ``contextRef`` attribute, if present.
        unit_ref:
            ``unitRef`` attribute, if present.
        decimals:
            ``decimals`` attribute, if present.
        text:
            Text content of the element (including nested markup text).
    """

    name: str
    context_ref: str | None
    unit_ref: str | None
    decimals: str | None
    text: str


@dataclass(frozen=True)
class RawDocument:
    """Intermediate representation of a whole instance document."""

    units: tuple[RawUnit, ...] = ()
    contexts: tuple[RawContext, ...] = ()
    facts: tuple[RawFact, ...] = ()


__all__ = [
    "RawUnit",
    "RawExplicitMember",
    "RawSegment",
    "RawPeriod",
    "RawContext",
    "RawFact",
    "RawDocument",
]
