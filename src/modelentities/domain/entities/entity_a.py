# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""EntityA Entity.

Purpose:
    Data-holder record with no attributes of its own; everything it carries
    comes from :class:`PojoBase`.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from modelentities.domain.entities.base import PojoBase


@dataclass(frozen=True, slots=True)
class EntityA(PojoBase):
    """Record entity inheriting the base identity/audit attributes."""

    serial_version_uid: ClassVar[int] = 1
