# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""EntityA table model."""

from __future__ import annotations

from modelentities.infrastructure.database.models.base import Base, PojoBaseMixin


class EntityARow(PojoBaseMixin, Base):
    """Row backing :class:`~modelentities.domain.entities.entity_a.EntityA`.

    Schema:
        entity_a

    Notes:
        - Carries only the shared identity/audit columns.
    """

    __tablename__ = "entity_a"
