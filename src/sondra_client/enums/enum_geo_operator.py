# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Geospatial operator enumeration."""

from enum import Enum


class EnumGeoOperator(str, Enum):
    """Geospatial operations a query may carry (at most one)."""

    GET_INTERSECTING = "get_intersecting"
    GET_NEAREST = "get_nearest"


__all__ = ["EnumGeoOperator"]
