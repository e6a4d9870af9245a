# src/xbrl_facts/domain/interfaces/gateways/xbrl_reader_gateway.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL document reader interface.

Purpose:
    Define a domain-level abstraction for turning raw XBRL text into the
    :class:`RawDocument` intermediate form. Implementations live in the
    adapters layer.

Layer:
    domain/interfaces/gateways
"""

from __future__ import annotations

from typing import Protocol

from xbrl_facts.domain.entities.raw_document import RawDocument


class DocumentReader(Protocol):
    """Protocol for adapters that parse raw XBRL into a RawDocument."""

    def read(self, content: bytes | str) -> RawDocument:
        """Parse raw XBRL content into a :class:`RawDocument`.

        Args:
            content:
                Complete XBRL instance document (bytes or string).

        Returns:
            Parsed :class:`RawDocument` instance.

        Raises:
            MalformedDocument:
                If the content is not well-formed or lacks the root container.
        """
        ...
