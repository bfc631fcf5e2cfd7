# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""EntityA JSON mapper.

Purpose:
    Convert between the frozen :class:`EntityA` domain entity and its JSON
    rendering. Null attributes are omitted on output, per
    :class:`EntityAHTTP`.

Layer:
    adapters/mappers
"""

from __future__ import annotations

from pydantic import ValidationError

from modelentities.adapters.schemas.http.entity_a import EntityAHTTP
from modelentities.domain.entities.entity_a import EntityA
from modelentities.domain.exceptions.serialization import EntitySerializationError
from modelentities.infrastructure.logging.logger import get_json_logger

__all__ = ["dumps", "from_http", "loads", "to_http"]

logger = get_json_logger(__name__)


def to_http(entity: EntityA) -> EntityAHTTP:
    """Map a domain entity to its JSON schema."""
    return EntityAHTTP(**entity.field_values())


def from_http(schema: EntityAHTTP) -> EntityA:
    """Map a JSON schema back to the domain entity."""
    return EntityA(
        id=schema.id,
        version=schema.version,
        created=schema.created,
        updated=schema.updated,
    )


def dumps(entity: EntityA) -> str:
    """Render an entity as JSON text.

    Args:
        entity: Entity to render.

    Returns:
        str: Compact JSON object; keys whose value is ``None`` are absent.

    Raises:
        EntitySerializationError: If an attribute holds a value that has no
            JSON rendering (e.g. a non-integer ``id``).
    """
    try:
        text = to_http(entity).model_dump_json()
    except ValidationError as exc:
        logger.warning(
            "entity render rejected",
            extra={"extra": {"entity": "EntityA", "errors": exc.error_count()}},
        )
        raise EntitySerializationError(
            "EntityA cannot be rendered as JSON",
            details={"errors": exc.errors(include_url=False, include_input=False)},
        ) from exc
    logger.debug("entity rendered", extra={"extra": {"entity": "EntityA", "bytes": len(text)}})
    return text


def loads(data: str | bytes) -> EntityA:
    """Parse JSON text into an entity.

    Args:
        data: JSON object text. Missing keys default to ``None``.

    Returns:
        EntityA: Parsed entity.

    Raises:
        EntitySerializationError: If the text is not valid JSON, carries
            unknown keys, or holds values of the wrong type.
    """
    try:
        schema = EntityAHTTP.model_validate_json(data)
    except ValidationError as exc:
        logger.warning(
            "entity JSON rejected",
            extra={"extra": {"entity": "EntityA", "errors": exc.error_count()}},
        )
        raise EntitySerializationError(
            "invalid EntityA JSON",
            details={"errors": exc.errors(include_url=False, include_input=False)},
        ) from exc
    return from_http(schema)
