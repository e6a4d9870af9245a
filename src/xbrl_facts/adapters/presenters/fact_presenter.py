# src/xbrl_facts/adapters/presenters/fact_presenter.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presenter: resolved facts → DTOs / JSON.

Purpose:
    Map domain facts into the application DTOs and render them as JSON. The
    value variant is preserved as the native JSON type (boolean, integer,
    float, string) and absent ``decimals``/``unit``/period keys are omitted.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Iterable

from xbrl_facts.application.schemas.dto.xbrl_facts import (
    ContextDTO,
    FactDTO,
    FactSetDTO,
    PeriodDTO,
    SegmentDTO,
)
from xbrl_facts.domain.entities.xbrl_fact import (
    BooleanValue,
    Context,
    Fact,
    FactValue,
    FloatValue,
    IntegerValue,
    TextValue,
)


def _value_to_wire(value: FactValue) -> bool | int | float | str:
    """Unwrap a tagged value into its native JSON-compatible type."""
    match value:
        case BooleanValue(value=b):
            return b
        case IntegerValue(value=i):
            return i
        case FloatValue(value=f):
            return f
        case TextValue(value=s):
            return s
    raise TypeError(f"Unsupported fact value: {value!r}")


def _map_context(context: Context) -> ContextDTO:
    """Map a domain Context to its DTO."""
    return ContextDTO(
        entity=context.entity,
        segments=[SegmentDTO(dimension=s.dimension, member=s.member) for s in context.segments],
        period=PeriodDTO(
            instant=context.period.instant,
            start_date=context.period.start_date,
            end_date=context.period.end_date,
        ),
    )


class FactPresenter:
    """Render facts for storage or transmission.

    Contexts shared by several facts are mapped once per presenter call.
    """

    def to_dto(self, facts: Iterable[Fact]) -> FactSetDTO:
        """Map facts to a :class:`FactSetDTO`."""
        mapped: dict[Context, ContextDTO] = {}
        items: list[FactDTO] = []
        for fact in facts:
            ctx = mapped.get(fact.context)
            if ctx is None:
                ctx = mapped[fact.context] = _map_context(fact.context)
            items.append(
                FactDTO(
                    context=ctx,
                    concept=fact.concept,
                    value=_value_to_wire(fact.value),
                    decimals=fact.decimals,
                    unit=fact.unit,
                )
            )
        return FactSetDTO(facts=items)

    def to_dict(self, facts: Iterable[Fact]) -> dict[str, object]:
        """Return a JSON-compatible dict with absent optional keys omitted."""
        return self.to_dto(facts).model_dump(by_alias=True, exclude_none=True)

    def to_json(self, facts: Iterable[Fact], *, indent: int | None = None) -> str:
        """Return the JSON rendering of ``facts``."""
        return self.to_dto(facts).model_dump_json(by_alias=True, exclude_none=True, indent=indent)


__all__ = ["FactPresenter"]
