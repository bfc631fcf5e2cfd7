# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""HTTP Schemas package (Adapters Layer).

Purpose:
    Public JSON schema surface for entity rendering.

Layer:
    adapters/schemas/http
"""

from __future__ import annotations

from modelentities.adapters.schemas.http.base import BaseHTTPSchema, JsonInclude
from modelentities.adapters.schemas.http.entity_a import EntityAHTTP

__all__ = ["BaseHTTPSchema", "EntityAHTTP", "JsonInclude"]
