# src/xbrl_facts/domain/entities/xbrl_fact.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL fact value objects.

Purpose:
    Provide immutable, domain-level representations of the resolved output
    of an XBRL instance document:

        * Periods (instant vs duration).
        * Segments (dimension/member pairs).
        * Contexts (entity + period + segments).
        * Typed fact values (boolean, integer, float, text).
        * Facts and the ordered fact set returned to callers.

Design:
    - All types are frozen dataclasses.
    - Invariants are enforced in __post_init__ hooks.
    - Contexts are shared by reference between facts, never copied.
    - Google-style docstrings with explicit Attributes sections.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, Literal, overload

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# --------------------------------------------------------------------------- #
# Context structures                                                          #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Period:
    """XBRL reporting period.

    Attributes:
        instant:
            Instant date string for instant periods.
        start_date:
            Start date string for duration periods.
        end_date:
            End date string for duration periods.
    """

    instant: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    def __post_init__(self) -> None:
        """Forbid mixing an instant with duration dates."""
        if self.instant is not None and (
            self.start_date is not None or self.end_date is not None
        ):
            raise ValueError("start_date/end_date must be None when instant is set.")

    @property
    def is_instant(self) -> bool:
        """Return True if the period represents a single instant in time."""
        return self.instant is not None

    def __str__(self) -> str:
        if self.instant is not None:
            return f"on {self.instant}"
        return f"from {self.start_date or ''} to {self.end_date or ''}"


@dataclass(frozen=True)
class Segment:
    """Explicit dimension qualifier on a context.

    Attributes:
        dimension:
            Unqualified dimension name (e.g., "StatementBusinessSegmentsAxis").
        member:
            Unqualified member name (e.g., "ProductMember").
    """

    dimension: str
    member: str

    def __str__(self) -> str:
        return f"{self.dimension}: {self.member}"


@dataclass(frozen=True)
class Context:
    """Reporting context shared by one or more facts.

    Attributes:
        id:
            Context identifier as declared in the document.
        entity:
            Entity identifier string (e.g., a CIK).
        period:
            Reporting period for the context.
        segments:
            Explicit members flattened in declaration order.
    """

    id: str
    entity: str
    period: Period
    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        """Normalize segments to an immutable tuple."""
        object.__setattr__(self, "segments", tuple(self.segments))

    def __str__(self) -> str:
        rendered = f"Entity: {self.entity}, {self.period}"
        if self.segments:
            rendered += f", Segments: [{', '.join(str(s) for s in self.segments)}]"
        return rendered


# --------------------------------------------------------------------------- #
# Typed values                                                                #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class BooleanValue:
    """Boolean fact value (``true`` / ``false`` literals)."""

    kind: ClassVar[Literal["boolean"]] = "boolean"
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntegerValue:
    """Signed 64-bit integer fact value."""

    kind: ClassVar[Literal["integer"]] = "integer"
    value: int

    def __post_init__(self) -> None:
        """Validate the signed 64-bit range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("IntegerValue.value must be an int.")
        if not _INT64_MIN <= self.value <= _INT64_MAX:
            raise ValueError("IntegerValue.value is outside the signed 64-bit range.")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    """Double-precision floating point fact value."""

    kind: ClassVar[Literal["float"]] = "float"
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class TextValue:
    """Cleaned textual fact value."""

    kind: ClassVar[Literal["text"]] = "text"
    value: str

    def __str__(self) -> str:
        return self.value


FactValue = BooleanValue | IntegerValue | FloatValue | TextValue

# --------------------------------------------------------------------------- #
# Facts                                                                       #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Fact:
    """A single reported data point.

    Attributes:
        context:
            Shared reporting context the fact belongs to.
        concept:
            Local (unqualified) element name of the fact.
        value:
            Typed value; see :data:`FactValue`.
        decimals:
            Declared decimals attribute, verbatim, if present.
        unit:
            Resolved unqualified unit string, if the unit reference resolved.
    """

    context: Context
    concept: str
    value: FactValue
    decimals: str | None = None
    unit: str | None = None

    @property
    def is_numeric(self) -> bool:
        """Return True for integer or float values."""
        return isinstance(self.value, IntegerValue | FloatValue)

    def __str__(self) -> str:
        value = str(self.value)
        if self.decimals:
            value += f", Decimals: {self.decimals}"
        if self.unit:
            value += f", Unit: {self.unit}"
        return f"Fact{{{self.context}, Concept: {self.concept}, Value: {value}}}"


class XBRLFactSet(Sequence[Fact]):
    """Ordered, immutable collection of facts resolved from one document.

    Facts appear in document declaration order.
    """

    __slots__ = ("_facts",)

    def __init__(self, facts: Iterable[Fact] = ()) -> None:
        self._facts: tuple[Fact, ...] = tuple(facts)

    @overload
    def __getitem__(self, index: int) -> Fact: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Fact, ...]: ...

    def __getitem__(self, index: int | slice) -> Fact | tuple[Fact, ...]:
        return self._facts[index]

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._facts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, XBRLFactSet):
            return self._facts == other._facts
        if isinstance(other, tuple):
            return self._facts == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._facts)

    def __repr__(self) -> str:
        return f"XBRLFactSet({len(self._facts)} facts)"

    def __str__(self) -> str:
        return f"XBRL{{Facts: [{', '.join(str(f) for f in self._facts)}]}}"

    @property
    def facts(self) -> tuple[Fact, ...]:
        """Return the underlying tuple of facts."""
        return self._facts

    def numeric_facts(self) -> tuple[Fact, ...]:
        """Return only the facts holding integer or float values."""
        return tuple(f for f in self._facts if f.is_numeric)


__all__ = [
    "Period",
    "Segment",
    "Context",
    "BooleanValue",
    "IntegerValue",
    "FloatValue",
    "TextValue",
    "FactValue",
    "Fact",
    "XBRLFactSet",
]
