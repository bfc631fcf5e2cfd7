# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""
Serialization Domain Exceptions

Purpose:
    Error conditions raised when an entity cannot be rebuilt from its JSON
    rendering or from a binary (pickle) stream.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class EntitySerializationError(DomainError):
    """JSON input could not be parsed into an entity."""

    code = "ENTITY_SERIALIZATION_ERROR"


class IncompatibleSerialVersionError(DomainError):
    """Binary stream was written by an incompatible entity layout."""

    code = "INCOMPATIBLE_SERIAL_VERSION"
