# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""Base Entity (Domain Layer).

Purpose:
    Shared identity/audit attributes for immutable record entities, plus the
    binary (pickle) reduction that guards against incompatible layouts via a
    per-class ``serial_version_uid`` marker.

Layer:
    domain/entities
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import UTC, datetime
from typing import Any, ClassVar, TypeVar

from modelentities.domain.exceptions.serialization import IncompatibleSerialVersionError

__all__ = ["PojoBase", "restore_entity"]

E = TypeVar("E", bound="PojoBase")


@dataclass(frozen=True, slots=True)
class PojoBase:
    """Base for record entities sharing identity and audit attributes.

    Every attribute is optional so that a zero-argument construction yields
    the default (unpersisted) state. Persistence and deserialization layers
    populate the attributes by constructing a new instance; updates go
    through :func:`dataclasses.replace`.

    Attributes:
        id:
            Surrogate identity assigned by the persistence layer.
        version:
            Persistence row version.
        created:
            Creation timestamp. Naive datetimes are normalized to UTC.
        updated:
            Last-update timestamp. Naive datetimes are normalized to UTC.
        serial_version_uid:
            Class-level binary layout marker; not an instance attribute.
    """

    serial_version_uid: ClassVar[int] = 1

    id: int | None = None
    version: int | None = None
    created: datetime | None = None
    updated: datetime | None = None

    def __post_init__(self) -> None:
        """Normalize audit timestamps to timezone-aware UTC.

        Naive values are taken as UTC; aware values are converted to UTC.
        """
        for name in ("created", "updated"):
            value = getattr(self, name)
            if value is None:
                continue
            if value.tzinfo is None:
                object.__setattr__(self, name, value.replace(tzinfo=UTC))
            else:
                object.__setattr__(self, name, value.astimezone(UTC))

    @property
    def is_new(self) -> bool:
        """Return True while the entity has no persistence identity."""
        return self.id is None

    def field_values(self) -> dict[str, Any]:
        """Return the entity attributes in declaration order.

        Returns:
            dict[str, Any]: Attribute name to value, ``None`` values included.
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __reduce__(self) -> tuple[Any, ...]:
        """Reduce to a version-stamped payload for pickling."""
        cls = type(self)
        return (restore_entity, (cls, cls.serial_version_uid, self.field_values()))


def restore_entity(cls: type[E], serial_version_uid: int, state: Mapping[str, Any]) -> E:
    """Rebuild an entity from a pickled payload.

    Args:
        cls:
            Entity class recorded in the stream.
        serial_version_uid:
            Layout marker recorded when the stream was written.
        state:
            Attribute values recorded when the stream was written.

    Returns:
        The rebuilt entity instance.

    Raises:
        IncompatibleSerialVersionError:
            If the recorded marker differs from ``cls.serial_version_uid``.
    """
    expected = cls.serial_version_uid
    if serial_version_uid != expected:
        raise IncompatibleSerialVersionError(
            f"{cls.__name__} stream has serial_version_uid {serial_version_uid}, "
            f"expected {expected}",
            details={"entity": cls.__name__, "expected": expected, "found": serial_version_uid},
        )
    return cls(**state)
