# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""Model entities with JSON and persistence adapters."""

from __future__ import annotations

__version__ = "0.1.0"
