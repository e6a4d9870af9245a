# src/xbrl_facts/__init__.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Typed fact extraction from XBRL instance documents.

Typical usage:
    from xbrl_facts import parse

    facts = parse(xml_text)
    for fact in facts.numeric_facts():
        print(fact.concept, fact.value.value, fact.unit)
"""

from __future__ import annotations

from xbrl_facts.application.use_cases.parse_xbrl_document import parse
from xbrl_facts.domain.entities.xbrl_fact import (
    BooleanValue,
    Context,
    Fact,
    FactValue,
    FloatValue,
    IntegerValue,
    Period,
    Segment,
    TextValue,
    XBRLFactSet,
)
from xbrl_facts.domain.exceptions.xbrl import MalformedDocument, XBRLError

__all__ = [
    "parse",
    "BooleanValue",
    "Context",
    "Fact",
    "FactValue",
    "FloatValue",
    "IntegerValue",
    "Period",
    "Segment",
    "TextValue",
    "XBRLFactSet",
    "MalformedDocument",
    "XBRLError",
]
