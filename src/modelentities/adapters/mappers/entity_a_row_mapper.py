# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""EntityA persistence mapper.

Purpose:
    Convert between :class:`EntityA` and its ORM row. No sessions, no
    queries; callers own the unit of work.

Layer:
    adapters/mappers
"""

from __future__ import annotations

from modelentities.domain.entities.entity_a import EntityA
from modelentities.infrastructure.database.models.entity_a import EntityARow

__all__ = ["from_row", "to_row"]


def to_row(entity: EntityA) -> EntityARow:
    """Build an ORM row from an entity.

    Only non-null attributes are copied so column defaults apply on insert.
    """
    values = {name: value for name, value in entity.field_values().items() if value is not None}
    return EntityARow(**values)


def from_row(row: EntityARow) -> EntityA:
    """Build an entity from a loaded ORM row."""
    return EntityA(id=row.id, version=row.version, created=row.created, updated=row.updated)
