# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""Domain exception surface."""

from __future__ import annotations

from .base import DomainError
from .serialization import EntitySerializationError, IncompatibleSerialVersionError

__all__ = ["DomainError", "EntitySerializationError", "IncompatibleSerialVersionError"]
