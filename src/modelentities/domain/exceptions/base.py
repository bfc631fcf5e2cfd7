# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for domain exceptions so adapters can map failures to
    stable error codes.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    Attributes:
        code:
            Stable error code suitable for logs and adapter mapping.
        details:
            Optional machine-readable diagnostic payload.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a DomainError instance.

        Args:
            message:
                Human-readable error message.
            details:
                Optional structured diagnostic payload for logs or adapters.

        """
        super().__init__(message)
        self.details: dict[str, Any] = details or {}
