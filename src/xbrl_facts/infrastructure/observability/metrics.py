# src/xbrl_facts/infrastructure/observability/metrics.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Prometheus metrics for XBRL parsing (registry-aware, test safe).

Collectors are exposed through accessor functions that return a *singleton*
bound to the **current** ``prometheus_client.REGISTRY``. Tests that swap the
default registry get fresh collectors without duplicate-registration errors.

Example:
    get_facts_dropped_total().labels(reason="unknown_context").inc(3)
    get_parse_latency_seconds().observe(0.250)
"""

from __future__ import annotations

import logging
import threading
from contextlib import suppress
from typing import Final, TypeVar

import prometheus_client as prom
from prometheus_client import Counter, Histogram

_log = logging.getLogger(__name__)

# Parsing a filing ranges from milliseconds to tens of seconds.
_BUCKETS: Final[tuple[float, ...]] = (
    0.005,
    0.010,
    0.025,
    0.050,
    0.100,
    0.250,
    0.500,
    1.000,
    2.500,
    5.000,
    10.000,
    30.000,
)

_C = TypeVar("_C", Counter, Histogram)

# Cache keyed by metric name within the currently-active registry.
_registry_id: int | None = None
_cache: dict[str, Counter | Histogram] = {}
_lock = threading.RLock()


# ---------------------------------------------------------------------------
# Registry-handling primitives


def _ensure_registry() -> None:
    """Reset the cache if the active registry changed."""
    global _registry_id
    with _lock:
        rid = id(prom.REGISTRY)
        if _registry_id != rid:
            _cache.clear()
            _registry_id = rid


def _lookup_existing(name: str, kind: type[_C]) -> _C | None:
    """Return a collector already registered under ``name`` in the active registry."""
    with _lock, suppress(Exception):
        mapping = getattr(prom.REGISTRY, "_names_to_collectors", None)
        if isinstance(mapping, dict):
            col = mapping.get(name)
            if isinstance(col, kind):
                return col
    return None


def _get_or_create(
    kind: type[_C],
    name: str,
    help_text: str,
    *,
    labelnames: tuple[str, ...] = (),
    **kwargs: object,
) -> _C:
    """Get or create a registry-bound collector with stable identity.

    Strategy:
    1. Return from module cache if present for the active registry.
    2. If the registry already has a collector by this name, reuse it.
    3. Otherwise, register a new collector on the active registry.

    Args:
        kind: ``Counter`` or ``Histogram``.
        name: Metric name (snake_case).
        help_text: Human-readable description.
        labelnames: Optional label names tuple.
        **kwargs: Extra constructor arguments (e.g., ``buckets``).

    Returns:
        Collector bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _cache.get(name)
        if isinstance(cached, kind):
            return cached

        existing = _lookup_existing(name, kind)
        if existing is not None:
            _cache[name] = existing
            return existing

        try:
            collector = kind(name, help_text, labelnames, registry=prom.REGISTRY, **kwargs)
        except ValueError:
            _log.exception("Failed to register Prometheus collector %s", name)
            raise
        _cache[name] = collector
        return collector


# ---------------------------------------------------------------------------
# Accessors


def get_documents_total() -> Counter:
    """Return counter for parsed documents.

    Labels:
        result: One of ``success|malformed``.
    """
    return _get_or_create(
        Counter,
        "xbrl_documents_total",
        "XBRL documents processed",
        labelnames=("result",),
    )


def get_facts_emitted_total() -> Counter:
    """Return counter for facts present in parse output."""
    return _get_or_create(Counter, "xbrl_facts_emitted_total", "Facts emitted by the resolver")


def get_facts_dropped_total() -> Counter:
    """Return counter for facts dropped during resolution.

    Labels:
        reason: ``unknown_context``.
    """
    return _get_or_create(
        Counter,
        "xbrl_facts_dropped_total",
        "Facts dropped during resolution",
        labelnames=("reason",),
    )


def get_facts_degraded_total() -> Counter:
    """Return counter for facts kept as text without numeric coercion.

    Labels:
        reason: ``unknown_unit|no_unit``.
    """
    return _get_or_create(
        Counter,
        "xbrl_facts_degraded_total",
        "Facts classified as text because no unit resolved",
        labelnames=("reason",),
    )


def get_parse_latency_seconds() -> Histogram:
    """Return histogram of end-to-end parse latency in seconds."""
    return _get_or_create(
        Histogram,
        "xbrl_parse_latency_seconds",
        "Latency (seconds) of XBRL document parsing",
        buckets=_BUCKETS,
    )


__all__ = [
    "get_documents_total",
    "get_facts_emitted_total",
    "get_facts_dropped_total",
    "get_facts_degraded_total",
    "get_parse_latency_seconds",
]
