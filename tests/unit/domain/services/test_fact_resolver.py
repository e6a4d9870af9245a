# tests/unit/domain/services/test_fact_resolver.py
# Copyright (c)
# SPDX-License-Identifier: MIT

from __future__ import annotations

from xbrl_facts.domain.entities.raw_document import (
    RawContext,
    RawDocument,
    RawExplicitMember,
    RawFact,
    RawPeriod,
    RawSegment,
    RawUnit,
)
from xbrl_facts.domain.entities.xbrl_fact import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    Period,
    Segment,
    TextValue,
)
from xbrl_facts.domain.services.fact_resolver import (
    FactResolver,
    NamingPolicy,
    build_context_table,
    build_unit_table,
)

_CTX = RawContext(id="c1", entity="0000789019", period=RawPeriod(instant="2023-06-30"))


def _fact(
    name: str,
    text: str,
    *,
    context_ref: str | None = "c1",
    unit_ref: str | None = None,
    decimals: str | None = None,
) -> RawFact:
    return RawFact(
        name=name,
        context_ref=context_ref,
        unit_ref=unit_ref,
        decimals=decimals,
        text=text,
    )


def test_unit_table_resolves_plain_and_divide_forms() -> None:
    units = build_unit_table(
        [
            RawUnit(id="u1", measure="iso4217:usd"),
            RawUnit(id="u2", numerator="usd", denominator="shares"),
            RawUnit(id="u3", numerator="iso4217:USD", denominator="xbrli:shares"),
            RawUnit(id="u4", measure="pure", numerator="usd", denominator=""),
        ]
    )

    assert units == {"u1": "usd", "u2": "usd/shares", "u3": "USD/shares", "u4": "pure"}


def test_unit_table_last_duplicate_wins() -> None:
    units = build_unit_table([RawUnit(id="u1", measure="USD"), RawUnit(id="u1", measure="EUR")])
    assert units == {"u1": "EUR"}


def test_context_table_flattens_segments_in_encounter_order() -> None:
    raw = RawContext(
        id="c2",
        entity="0000789019",
        period=RawPeriod(start_date="2022-07-01", end_date="2023-06-30"),
        segments=(
            RawSegment(members=(RawExplicitMember("us-gaap:ProductOrServiceAxis", "msft:XboxMember"),)),
            RawSegment(members=(RawExplicitMember("srt:StatementGeographicalAxis", "country:US"),)),
        ),
    )

    ctx = build_context_table([raw])["c2"]

    assert ctx.segments == (
        Segment(dimension="ProductOrServiceAxis", member="XboxMember"),
        Segment(dimension="StatementGeographicalAxis", member="US"),
    )
    assert ctx.period == Period(start_date="2022-07-01", end_date="2023-06-30")
    assert ctx.period.is_instant is False


def test_context_table_prefers_instant_over_duration() -> None:
    raw = RawContext(
        id="c1",
        entity="e",
        period=RawPeriod(instant="2023-06-30", start_date="2022-07-01", end_date="2023-06-30"),
    )
    ctx = build_context_table([raw])["c1"]
    assert ctx.period == Period(instant="2023-06-30")


def test_naming_policy_optionally_strips_suffixes() -> None:
    raw = RawContext(
        id="c1",
        entity="e",
        period=RawPeriod(instant="2023-06-30"),
        segments=(
            RawSegment(members=(RawExplicitMember("us-gaap:ProductOrServiceAxis", "msft:XboxMember"),)),
        ),
    )

    default = build_context_table([raw])["c1"].segments[0]
    stripped = build_context_table([raw], NamingPolicy(strip_dimension_suffixes=True))["c1"].segments[0]

    assert default == Segment("ProductOrServiceAxis", "XboxMember")
    assert stripped == Segment("ProductOrService", "Xbox")


def test_resolver_scenario_single_numeric_fact() -> None:
    doc = RawDocument(
        units=(RawUnit(id="u1", measure="iso4217:USD"),),
        contexts=(_CTX,),
        facts=(_fact("Assets", "1000000", unit_ref="u1", decimals="-6"),),
    )

    facts = FactResolver().resolve(doc)

    assert len(facts) == 1
    fact = facts[0]
    assert fact.concept == "Assets"
    assert fact.context.entity == "0000789019"
    assert fact.context.period == Period(instant="2023-06-30")
    assert fact.value == IntegerValue(1000000)
    assert fact.decimals == "-6"
    assert fact.unit == "USD"


def test_resolver_drops_unknown_contexts_and_keeps_order() -> None:
    doc = RawDocument(
        units=(RawUnit(id="u1", measure="USD"),),
        contexts=(_CTX,),
        facts=(
            _fact("A", "1", unit_ref="u1"),
            _fact("B", "2", unit_ref="u1", context_ref="nope"),
            _fact("C", "3", unit_ref="u1"),
            _fact("schemaRef", "", context_ref=None),
            _fact("D", "4.5", unit_ref="u1"),
        ),
    )

    facts, stats = FactResolver().resolve_with_stats(doc)

    assert [f.concept for f in facts] == ["A", "C", "D"]
    assert stats.candidates == 5
    assert stats.emitted == 3
    assert stats.dropped_unknown_context == 2
    assert stats.dropped_concepts == ["B", "schemaRef"]


def test_resolver_unknown_unit_forces_text() -> None:
    doc = RawDocument(
        contexts=(_CTX,),
        facts=(
            _fact("Shares", "7432", unit_ref="missing"),
            _fact("Flag", "true", unit_ref="missing"),
        ),
    )

    facts, stats = FactResolver().resolve_with_stats(doc)

    assert facts[0].value == TextValue("7432")
    assert facts[0].unit is None
    assert facts[1].value == TextValue("true")
    assert stats.degraded_unknown_unit == 2
    assert stats.untyped_no_unit == 0


def test_resolver_no_unit_is_text_and_cleaned() -> None:
    doc = RawDocument(
        contexts=(_CTX,),
        facts=(
            _fact("Note", "hello <b>world</b>\n"),
            _fact("Flag", "false"),
            _fact("Empty", ""),
        ),
    )

    facts, stats = FactResolver().resolve_with_stats(doc)

    assert [f.value for f in facts] == [TextValue("hello world"), TextValue("false"), TextValue("")]
    assert all(f.unit is None and f.decimals is None for f in facts)
    assert stats.untyped_no_unit == 3


def test_resolver_unit_bearing_values_follow_coercion_ladder() -> None:
    doc = RawDocument(
        units=(RawUnit(id="pure", measure="xbrli:pure"),),
        contexts=(_CTX,),
        facts=(
            _fact("B", "true", unit_ref="pure"),
            _fact("I", "42", unit_ref="pure"),
            _fact("F", "42.5", unit_ref="pure"),
            _fact("T", "", unit_ref="pure"),
        ),
    )

    values = [f.value for f in FactResolver().resolve(doc)]

    assert values == [BooleanValue(True), IntegerValue(42), FloatValue(42.5), TextValue("")]


def test_resolver_shares_context_objects_between_facts() -> None:
    doc = RawDocument(
        units=(RawUnit(id="u1", measure="USD"),),
        contexts=(_CTX,),
        facts=(_fact("A", "1", unit_ref="u1"), _fact("B", "2", unit_ref="u1")),
    )

    facts = FactResolver().resolve(doc)

    assert facts[0].context is facts[1].context


def test_resolver_last_duplicate_context_wins() -> None:
    doc = RawDocument(
        contexts=(_CTX, RawContext(id="c1", entity="other", period=RawPeriod(instant="2024-01-01"))),
        facts=(_fact("Note", "x"),),
    )

    facts = FactResolver().resolve(doc)

    assert facts[0].context.entity == "other"
