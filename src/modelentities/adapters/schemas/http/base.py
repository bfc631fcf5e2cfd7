# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""
Base HTTP Schema (Adapters Layer)

Purpose:
    Canonical Pydantic base for adapter-layer JSON schemas. Enforces strict
    config and a per-type policy for how null values are rendered.

Layer: adapters/schemas/http

Notes:
    - Transport-facing only. Domain entities must not import from this module.
    - Subclasses choose their null policy through the ``json_include`` class
      attribute; the policy applies to every dump path.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class JsonInclude(str, Enum):
    """Null rendering policy for a schema type."""

    ALWAYS = "always"
    NON_NULL = "non_null"


class BaseHTTPSchema(BaseModel):
    """Base class for all JSON-facing schemas.

    Attributes:
        model_config: Pydantic v2 ``ConfigDict`` with strict validation.
        json_include: Null rendering policy. ``NON_NULL`` drops every key whose
            value is ``None`` from the rendered record.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )

    json_include: ClassVar[JsonInclude] = JsonInclude.ALWAYS

    @model_serializer(mode="wrap")
    def serialize_with_json_include(self, handler: SerializerFunctionWrapHandler) -> Any:
        """Render the model, dropping null keys under ``NON_NULL``."""
        data = handler(self)
        if type(self).json_include is JsonInclude.NON_NULL and isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def model_dump_http(self, **kwargs: Any) -> dict[str, Any]:
        """Return a JSON-serializable dict suitable for HTTP responses.

        Args:
            **kwargs: Optional Pydantic dump settings (e.g., ``by_alias=True``).

        Returns:
            dict[str, Any]: Fully JSON-serializable representation.
        """
        return self.model_dump(mode="json", **kwargs)
