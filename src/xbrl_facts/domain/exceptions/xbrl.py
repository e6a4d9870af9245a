# src/xbrl_facts/domain/exceptions/xbrl.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL domain exceptions.

Purpose:
    Provide XBRL-specific error types for document-level failures.

Layer:
    domain/exceptions

Notes:
    - Only document-level problems are raised. Unknown context or unit
      references degrade individual facts and never surface as errors.
"""

from __future__ import annotations

from xbrl_facts.domain.exceptions.base import DomainError


class XBRLError(DomainError):
    """Base class for XBRL-related domain errors."""

    code = "XBRL_ERROR"


class MalformedDocument(XBRLError):
    """Raised when input is not well-formed XML or lacks the ``xbrl`` container."""

    code = "XBRL_MALFORMED_DOCUMENT"


__all__ = ["XBRLError", "MalformedDocument"]
