# src/xbrl_facts/domain/services/value_normalization.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Name and value normalization helpers.

Purpose:
    Pure functions used by the fact resolver to turn raw XBRL lexical values
    into typed domain values:

        * ``local_name``: strip a namespace prefix ("us-gaap:Revenues" → "Revenues").
        * ``strip_naming_suffix``: optional "Axis"/"Member" suffix removal.
        * ``strip_markup``: remove embedded HTML/XML tags, keep text verbatim.
        * ``clean_text``: markup stripping + whitespace collapsing.
        * ``coerce_value``: boolean → integer → float → text ladder.

Layer:
    domain/services
"""

from __future__ import annotations

import math
import re
import warnings
from typing import Final

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from xbrl_facts.domain.entities.xbrl_fact import (
    BooleanValue,
    FactValue,
    FloatValue,
    IntegerValue,
    TextValue,
)

_INT64_MIN: Final[int] = -(2**63)
_INT64_MAX: Final[int] = 2**63 - 1

_BOOLEANS: Final[dict[str, bool]] = {"true": True, "false": False}
_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOATS: Final[dict[str, float]] = {
    "INF": math.inf,
    "+INF": math.inf,
    "-INF": -math.inf,
    "NaN": math.nan,
}


def local_name(qname: str) -> str:
    """Return the text after the last ``:`` (the whole string if none)."""
    return qname.rpartition(":")[2]


def strip_naming_suffix(name: str, suffix: str) -> str:
    """Remove a conventional XBRL suffix ("Axis", "Member") when present.

    The suffix is kept if removing it would leave an empty name.
    """
    if name.endswith(suffix) and len(name) > len(suffix):
        return name[: -len(suffix)]
    return name


def strip_markup(value: str) -> str:
    """Remove tag markup while keeping inter-tag text verbatim.

    Character references are not decoded: ``&lt;b&gt;`` stays as written and
    is never turned into a tag.
    """
    if "<" not in value:
        return value
    # Escaping "&" up front makes the parser hand every reference back unchanged.
    with warnings.catch_warnings():
        # Short fact values such as "example.htm" look like file names to bs4.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(value.replace("&", "&amp;"), "html.parser")
    return soup.get_text()


def collapse_whitespace(value: str) -> str:
    """Collapse runs of whitespace (including newlines) into single spaces and trim."""
    return " ".join(value.split())


def clean_text(value: str) -> str:
    """Strip markup and collapse whitespace.

    Stripping repeats until nothing changes (``"<<b>b>x"`` leaves a tag
    behind after one pass), so applying the function to its own output
    returns the same string.
    """
    cleaned = collapse_whitespace(strip_markup(value))
    while True:
        again = collapse_whitespace(strip_markup(cleaned))
        if again == cleaned:
            return cleaned
        cleaned = again


def _parse_integer(text: str) -> int | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return None
    return number


def _parse_float(text: str) -> float | None:
    special = _SPECIAL_FLOATS.get(text)
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(text):
        return None
    number = float(text)
    # Finite literals that overflow double precision are not representable.
    if math.isinf(number):
        return None
    return number


def coerce_value(raw: str) -> FactValue:
    """Coerce a unit-bearing fact's raw text into a typed value.

    The ladder is strictly ordered: boolean literal, signed 64-bit integer,
    64-bit float, then cleaned text when nothing parses.

    Args:
        raw:
            Raw text content of the fact element.

    Returns:
        The first variant that accepts the (trimmed) text.
    """
    text = raw.strip()

    boolean = _BOOLEANS.get(text)
    if boolean is not None:
        return BooleanValue(boolean)

    integer = _parse_integer(text)
    if integer is not None:
        return IntegerValue(integer)

    number = _parse_float(text)
    if number is not None:
        return FloatValue(number)

    return TextValue(clean_text(raw))


def text_value(raw: str) -> TextValue:
    """Return the cleaned textual value for a fact without a resolved unit."""
    return TextValue(clean_text(raw))


__all__ = [
    "local_name",
    "strip_naming_suffix",
    "strip_markup",
    "collapse_whitespace",
    "clean_text",
    "coerce_value",
    "text_value",
]
