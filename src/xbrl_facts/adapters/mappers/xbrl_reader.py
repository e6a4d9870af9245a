# src/xbrl_facts/adapters/mappers/xbrl_reader.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL document reader adapter.

Purpose:
    Parse raw XBRL instance XML into the schema-shaped :class:`RawDocument`
    intermediate form without leaking XML parsing details into the domain.

Layer:
    adapters/mappers

Notes:
    - Elements are matched by local name; namespace URIs and prefixes are
      ignored because filers bind XBRL namespaces to arbitrary prefixes.
    - Only direct children of the ``xbrl`` root are considered. ``unit`` and
      ``context`` children are declarations, every other child is a
      candidate fact.
    - The reader is permissive: missing attributes become ``None`` and
      missing text becomes an empty string. Interpretation happens in the
      fact resolver.
"""

from __future__ import annotations

from typing import cast
from xml.etree.ElementTree import Element, ParseError  # stdlib typed

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from xbrl_facts.domain.entities.raw_document import (
    RawContext,
    RawDocument,
    RawExplicitMember,
    RawFact,
    RawPeriod,
    RawSegment,
    RawUnit,
)
from xbrl_facts.domain.exceptions.xbrl import MalformedDocument

_ROOT = "xbrl"


def _local(tag: object) -> str:
    """Return the local part of a Clark-notation tag ("{uri}name" → "name").

    Comments and processing instructions have non-string tags and map to "".
    """
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def _children(elem: Element, name: str) -> list[Element]:
    """Return direct children of ``elem`` whose local name is ``name``."""
    return [child for child in elem if _local(child.tag) == name]


def _child(elem: Element | None, *path: str) -> Element | None:
    """Follow a path of local names through first-matching direct children."""
    current = elem
    for name in path:
        if current is None:
            return None
        current = next((c for c in current if _local(c.tag) == name), None)
    return current


def _text(elem: Element | None) -> str:
    """Return the stripped text content of ``elem`` (descendants included)."""
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()


def _optional_text(elem: Element | None) -> str | None:
    """Return stripped text, or None when the element is absent or empty."""
    text = _text(elem)
    return text or None


class XBRLDocumentReader:
    """Parse raw XBRL XML content into a :class:`RawDocument`.

    This adapter turns low-level XML into the raw intermediate structures
    consumed by the fact resolver. It performs no I/O.
    """

    def read(self, content: bytes | str) -> RawDocument:
        """Parse the provided XBRL content.

        Args:
            content:
                Raw XML content as bytes or string.

        Returns:
            Parsed :class:`RawDocument` instance.

        Raises:
            MalformedDocument:
                If the XML is not well-formed, uses forbidden constructs
                (entity declarations, external references) or the root
                element is not ``xbrl``.
        """
        root = self._parse_root(content)

        units: list[RawUnit] = []
        contexts: list[RawContext] = []
        facts: list[RawFact] = []

        for elem in root:
            name = _local(elem.tag)
            if not name:
                continue
            if name == "unit":
                units.append(self._read_unit(elem))
            elif name == "context":
                contexts.append(self._read_context(elem))
            else:
                facts.append(self._read_fact(name, elem))

        return RawDocument(units=tuple(units), contexts=tuple(contexts), facts=tuple(facts))

    # ------------------------------------------------------------------ #
    # XML parsing                                                        #
    # ------------------------------------------------------------------ #

    def _parse_root(self, content: bytes | str) -> Element:
        """Parse ``content`` and validate the root container element."""
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            root = cast(Element, ET.fromstring(data))
        except ParseError as exc:
            line, column = getattr(exc, "position", (None, None))
            raise MalformedDocument(
                "Document is not well-formed XML.",
                details={
                    "reason": "not_well_formed",
                    "line": line,
                    "column": column,
                    "error": str(exc),
                },
            ) from exc
        except DefusedXmlException as exc:
            raise MalformedDocument(
                "Document uses forbidden XML constructs.",
                details={"reason": "forbidden_construct", "error": str(exc)},
            ) from exc

        root_name = _local(root.tag)
        if root_name != _ROOT:
            raise MalformedDocument(
                f"Expected an '{_ROOT}' root element, found '{root_name}'.",
                details={"reason": "unexpected_root", "root": root_name},
            )
        return root

    # ------------------------------------------------------------------ #
    # Declarations                                                       #
    # ------------------------------------------------------------------ #

    def _read_unit(self, elem: Element) -> RawUnit:
        """Read a ``unit`` declaration (plain measure or divide form)."""
        return RawUnit(
            id=elem.attrib.get("id", ""),
            measure=_text(_child(elem, "measure")),
            numerator=_text(_child(elem, "divide", "unitNumerator", "measure")),
            denominator=_text(_child(elem, "divide", "unitDenominator", "measure")),
        )

    def _read_context(self, elem: Element) -> RawContext:
        """Read a ``context`` declaration.

        Explicit members are gathered from every ``entity/segment`` block and
        then from every ``scenario`` block, in document order.
        """
        entity = _child(elem, "entity")
        blocks = _children(entity, "segment") if entity is not None else []
        blocks += _children(elem, "scenario")

        segments = tuple(
            RawSegment(
                members=tuple(
                    RawExplicitMember(
                        dimension=member.attrib.get("dimension", ""),
                        value=_text(member),
                    )
                    for member in _children(block, "explicitMember")
                )
            )
            for block in blocks
        )

        period = _child(elem, "period")
        return RawContext(
            id=elem.attrib.get("id", ""),
            entity=_text(_child(entity, "identifier")),
            period=RawPeriod(
                instant=_optional_text(_child(period, "instant")),
                start_date=_optional_text(_child(period, "startDate")),
                end_date=_optional_text(_child(period, "endDate")),
            ),
            segments=segments,
        )

    # ------------------------------------------------------------------ #
    # Facts                                                              #
    # ------------------------------------------------------------------ #

    def _read_fact(self, name: str, elem: Element) -> RawFact:
        """Read a candidate fact element; text is kept unstripped."""
        return RawFact(
            name=name,
            context_ref=elem.attrib.get("contextRef"),
            unit_ref=elem.attrib.get("unitRef"),
            decimals=elem.attrib.get("decimals"),
            text="".join(elem.itertext()),
        )


__all__ = ["XBRLDocumentReader"]
