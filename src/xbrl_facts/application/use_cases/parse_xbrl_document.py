# src/xbrl_facts/application/use_cases/parse_xbrl_document.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Use case: Parse raw XBRL into an ordered fact set.

Layer:
    application/use_cases

Purpose:
    Accept raw XBRL text, read it through a :class:`DocumentReader` into the
    raw intermediate form, and resolve facts with :class:`FactResolver`.
    Parsing is synchronous and CPU-bound; nothing is shared between calls
    except immutable collaborators.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from xbrl_facts.adapters.mappers.xbrl_reader import XBRLDocumentReader
from xbrl_facts.config.settings import Settings, get_settings
from xbrl_facts.domain.entities.xbrl_fact import XBRLFactSet
from xbrl_facts.domain.exceptions.xbrl import MalformedDocument
from xbrl_facts.domain.interfaces.gateways.xbrl_reader_gateway import DocumentReader
from xbrl_facts.domain.services.fact_resolver import (
    FactResolver,
    NamingPolicy,
    ResolutionStats,
)
from xbrl_facts.infrastructure.logging.logger import document_context, get_json_logger
from xbrl_facts.infrastructure.observability.metrics import (
    get_documents_total,
    get_facts_degraded_total,
    get_facts_dropped_total,
    get_facts_emitted_total,
    get_parse_latency_seconds,
)

log = get_json_logger(__name__)


@dataclass(frozen=True)
class ParseXBRLDocumentRequest:
    """Request parameters for parsing a single XBRL document.

    Attributes:
        content:
            Complete XBRL instance document as bytes or string.
        document_id:
            Optional identifier (file name, accession number) used for log
            correlation only.
    """

    content: bytes | str
    document_id: str | None = None


@dataclass(frozen=True)
class ParseXBRLDocumentResult:
    """Result of parsing a single XBRL document.

    Attributes:
        facts:
            Resolved facts in document order.
        stats:
            Drop/degrade counters gathered during resolution.
        elapsed_s:
            Wall-clock parse time in seconds.
    """

    facts: XBRLFactSet
    stats: ResolutionStats
    elapsed_s: float


class ParseXBRLDocumentUseCase:
    """Use case: read and resolve one XBRL instance document.

    Args:
        reader:
            Adapter that turns raw text into a RawDocument.
        resolver:
            Domain service that resolves raw facts.
        max_document_bytes:
            Inputs larger than this are rejected before parsing.
        metrics_enabled:
            Whether to record Prometheus counters.
    """

    def __init__(
        self,
        reader: DocumentReader,
        resolver: FactResolver,
        *,
        max_document_bytes: int | None = None,
        metrics_enabled: bool = True,
    ) -> None:
        """Initialize the use case."""
        self._reader = reader
        self._resolver = resolver
        self._max_document_bytes = max_document_bytes
        self._metrics_enabled = metrics_enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> ParseXBRLDocumentUseCase:
        """Build the default wiring (defusedxml reader + resolver) from settings."""
        return cls(
            reader=XBRLDocumentReader(),
            resolver=FactResolver(
                NamingPolicy(strip_dimension_suffixes=settings.strip_dimension_suffixes)
            ),
            max_document_bytes=settings.max_document_bytes,
            metrics_enabled=settings.metrics_enabled,
        )

    def execute(self, req: ParseXBRLDocumentRequest) -> ParseXBRLDocumentResult:
        """Parse the requested document.

        Args:
            req:
                Request carrying the raw document content.

        Returns:
            A :class:`ParseXBRLDocumentResult` with facts and statistics.

        Raises:
            MalformedDocument:
                If the document is too large, not well-formed, or lacks the
                ``xbrl`` root element.
        """
        with document_context(req.document_id):
            started = time.perf_counter()
            try:
                self._check_size(req.content)
                raw = self._reader.read(req.content)
            except MalformedDocument as exc:
                log.warning(
                    "Malformed XBRL document",
                    extra={"extra": {"code": exc.code, **exc.details}},
                )
                if self._metrics_enabled:
                    get_documents_total().labels(result="malformed").inc()
                raise

            facts, stats = self._resolver.resolve_with_stats(raw)
            elapsed = time.perf_counter() - started

            log.info(
                "Parsed XBRL document",
                extra={
                    "extra": {
                        "units": len(raw.units),
                        "contexts": len(raw.contexts),
                        "candidates": stats.candidates,
                        "emitted": stats.emitted,
                        "dropped_unknown_context": stats.dropped_unknown_context,
                        "degraded_unknown_unit": stats.degraded_unknown_unit,
                        "untyped_no_unit": stats.untyped_no_unit,
                        "elapsed_s": round(elapsed, 6),
                    }
                },
            )
            if self._metrics_enabled:
                self._record_metrics(stats, elapsed)

            return ParseXBRLDocumentResult(facts=facts, stats=stats, elapsed_s=elapsed)

    def _check_size(self, content: bytes | str) -> None:
        if self._max_document_bytes is None:
            return
        # str length is a lower bound on its UTF-8 size; encode only when close.
        size = len(content)
        if isinstance(content, str) and size <= self._max_document_bytes:
            size = len(content.encode("utf-8"))
        if size > self._max_document_bytes:
            raise MalformedDocument(
                "Document exceeds the configured size limit.",
                details={
                    "reason": "too_large",
                    "size": size,
                    "limit": self._max_document_bytes,
                },
            )

    @staticmethod
    def _record_metrics(stats: ResolutionStats, elapsed: float) -> None:
        get_documents_total().labels(result="success").inc()
        get_facts_emitted_total().inc(stats.emitted)
        get_facts_dropped_total().labels(reason="unknown_context").inc(
            stats.dropped_unknown_context
        )
        get_facts_degraded_total().labels(reason="unknown_unit").inc(stats.degraded_unknown_unit)
        get_facts_degraded_total().labels(reason="no_unit").inc(stats.untyped_no_unit)
        get_parse_latency_seconds().observe(elapsed)


def parse(content: bytes | str, *, settings: Settings | None = None) -> XBRLFactSet:
    """Parse an XBRL instance document into its ordered facts.

    Args:
        content:
            Complete XBRL instance document as bytes or string.
        settings:
            Optional explicit settings; defaults to :func:`get_settings`.

    Returns:
        Facts in document order.

    Raises:
        MalformedDocument:
            If the input is not a well-formed XBRL instance.
    """
    use_case = ParseXBRLDocumentUseCase.from_settings(settings or get_settings())
    return use_case.execute(ParseXBRLDocumentRequest(content=content)).facts


__all__ = [
    "ParseXBRLDocumentRequest",
    "ParseXBRLDocumentResult",
    "ParseXBRLDocumentUseCase",
    "parse",
]
