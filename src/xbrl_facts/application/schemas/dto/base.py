# src/xbrl_facts/application/schemas/dto/base.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Base DTO (Application Layer).

Purpose:
    Canonical Pydantic base for all application-layer DTOs. Transport-agnostic.

Layer: application/schemas/dto
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base class for application-layer DTOs.

    Notes:
        - Enforces strict fields (`extra='forbid'`).
        - Instances are frozen; facts are read-only once rendered.
        - Non-finite floats render as the ``NaN``/``Infinity`` constants that
          ``json.loads`` accepts, so they never collapse to ``null``.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )
