# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""HTTP Schemas: EntityA.

Synopsis:
    JSON contract for :class:`~modelentities.domain.entities.entity_a.EntityA`.
    Null attributes are omitted from the rendered record.

Layer:
    adapters/schemas/http
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import AwareDatetime, Field

from modelentities.adapters.schemas.http.base import BaseHTTPSchema, JsonInclude


class EntityAHTTP(BaseHTTPSchema):
    """JSON schema for a single EntityA record."""

    json_include: ClassVar[JsonInclude] = JsonInclude.NON_NULL

    id: int | None = Field(default=None, description="Persistence identity", examples=[42])
    version: int | None = Field(default=None, description="Row version", examples=[1])
    created: AwareDatetime | None = Field(
        default=None, description="Creation timestamp (ISO-8601)", examples=["2025-10-28T12:34:56Z"]
    )
    updated: AwareDatetime | None = Field(
        default=None, description="Last-update timestamp (ISO-8601)", examples=["2025-10-28T12:34:56Z"]
    )
