# src/xbrl_facts/domain/services/fact_resolver.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fact resolution service.

Purpose:
    Turn a :class:`RawDocument` into the ordered facts of an instance:

        1. Build the unit table (id → unqualified measure string).
        2. Build the context table (id → :class:`Context`).
        3. Resolve every candidate fact against both tables in document order.

Layer:
    domain/services

Notes:
    - Later duplicate unit/context identifiers overwrite earlier ones.
    - A fact with an unknown context is dropped. A fact with a missing or
      unknown unit is kept as cleaned text. Neither raises.
    - Resolution is pure and holds no state between calls, so one resolver
      can be shared by concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from xbrl_facts.domain.entities.raw_document import (
    RawContext,
    RawDocument,
    RawFact,
    RawUnit,
)
from xbrl_facts.domain.entities.xbrl_fact import (
    Context,
    Fact,
    Period,
    Segment,
    XBRLFactSet,
)
from xbrl_facts.domain.services.value_normalization import (
    coerce_value,
    local_name,
    strip_naming_suffix,
    text_value,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamingPolicy:
    """Normalization applied to segment dimension/member names.

    Attributes:
        strip_dimension_suffixes:
            When True, drop a trailing "Axis" from dimensions and a trailing
            "Member" from members after prefix stripping.
    """

    strip_dimension_suffixes: bool = False

    def dimension(self, qname: str) -> str:
        """Return the normalized dimension name."""
        name = local_name(qname.strip())
        if self.strip_dimension_suffixes:
            name = strip_naming_suffix(name, "Axis")
        return name

    def member(self, qname: str) -> str:
        """Return the normalized member name."""
        name = local_name(qname.strip())
        if self.strip_dimension_suffixes:
            name = strip_naming_suffix(name, "Member")
        return name


@dataclass
class ResolutionStats:
    """Counters describing how candidate facts were resolved.

    Attributes:
        candidates:
            Candidate fact elements seen.
        emitted:
            Facts present in the output.
        dropped_unknown_context:
            Facts dropped because their context reference did not resolve.
        degraded_unknown_unit:
            Facts forced to text because their unit reference did not resolve.
        untyped_no_unit:
            Facts kept as text because they declared no unit reference.
        dropped_concepts:
            Concept names of dropped facts, in encounter order.
    """

    candidates: int = 0
    emitted: int = 0
    dropped_unknown_context: int = 0
    degraded_unknown_unit: int = 0
    untyped_no_unit: int = 0
    dropped_concepts: list[str] = field(default_factory=list)


def build_unit_table(units: Iterable[RawUnit]) -> dict[str, str]:
    """Resolve declared units into unqualified measure strings.

    A divide form is used when both numerator and denominator are present;
    otherwise the plain measure is used. Prefixes are stripped from each
    measure separately so "iso4217:USD" over "xbrli:shares" becomes
    "USD/shares".

    Args:
        units:
            Raw unit declarations.

    Returns:
        Mapping from unit ID to measure (e.g., "USD" or "USD/shares").
    """
    table: dict[str, str] = {}
    for unit in units:
        if unit.numerator and unit.denominator:
            measure = f"{local_name(unit.numerator)}/{local_name(unit.denominator)}"
        else:
            measure = local_name(unit.measure)
        table[unit.id] = measure
    return table


def build_context_table(
    contexts: Iterable[RawContext], policy: NamingPolicy | None = None
) -> dict[str, Context]:
    """Resolve declared contexts into shared :class:`Context` objects.

    Args:
        contexts:
            Raw context declarations.
        policy:
            Naming policy for segment names; defaults to prefix stripping only.

    Returns:
        Mapping from context ID to :class:`Context`.
    """
    naming = policy or NamingPolicy()
    table: dict[str, Context] = {}
    for raw in contexts:
        segments = tuple(
            Segment(dimension=naming.dimension(m.dimension), member=naming.member(m.value))
            for block in raw.segments
            for m in block.members
        )
        if raw.period.instant is not None:
            period = Period(instant=raw.period.instant)
        else:
            period = Period(start_date=raw.period.start_date, end_date=raw.period.end_date)
        table[raw.id] = Context(
            id=raw.id,
            entity=raw.entity,
            period=period,
            segments=segments,
        )
    return table


class FactResolver:
    """Resolve raw candidate facts into typed :class:`Fact` objects."""

    def __init__(self, policy: NamingPolicy | None = None) -> None:
        """Initialize the resolver.

        Args:
            policy:
                Naming policy for segment dimension/member names.
        """
        self._policy = policy or NamingPolicy()

    @property
    def policy(self) -> NamingPolicy:
        """Return the naming policy in use."""
        return self._policy

    def resolve(self, document: RawDocument) -> XBRLFactSet:
        """Resolve the document's facts, discarding statistics."""
        facts, _ = self.resolve_with_stats(document)
        return facts

    def resolve_with_stats(self, document: RawDocument) -> tuple[XBRLFactSet, ResolutionStats]:
        """Resolve the document's facts and report drop/degrade counts.

        Args:
            document:
                Intermediate form produced by the document reader.

        Returns:
            Tuple of (ordered fact set, resolution statistics).
        """
        units = build_unit_table(document.units)
        contexts = build_context_table(document.contexts, self._policy)
        stats = ResolutionStats()

        facts: list[Fact] = []
        for raw in document.facts:
            stats.candidates += 1
            fact = self._resolve_fact(raw, contexts, units, stats)
            if fact is not None:
                facts.append(fact)

        stats.emitted = len(facts)
        return XBRLFactSet(facts), stats

    def _resolve_fact(
        self,
        raw: RawFact,
        contexts: Mapping[str, Context],
        units: Mapping[str, str],
        stats: ResolutionStats,
    ) -> Fact | None:
        context = contexts.get(raw.context_ref) if raw.context_ref is not None else None
        if context is None:
            stats.dropped_unknown_context += 1
            stats.dropped_concepts.append(raw.name)
            logger.debug(
                "Dropping fact with unknown context",
                extra={"extra": {"concept": raw.name, "context_ref": raw.context_ref}},
            )
            return None

        unit = units.get(raw.unit_ref) if raw.unit_ref is not None else None
        if unit is None:
            if raw.unit_ref is None:
                stats.untyped_no_unit += 1
            else:
                stats.degraded_unknown_unit += 1
                logger.debug(
                    "Unit reference did not resolve; treating fact as text",
                    extra={"extra": {"concept": raw.name, "unit_ref": raw.unit_ref}},
                )
            value = text_value(raw.text)
        else:
            value = coerce_value(raw.text)

        return Fact(
            context=context,
            concept=raw.name,
            value=value,
            decimals=raw.decimals,
            unit=unit,
        )


__all__ = [
    "NamingPolicy",
    "ResolutionStats",
    "FactResolver",
    "build_unit_table",
    "build_context_table",
]
