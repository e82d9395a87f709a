# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Aggregation operator enumeration."""

from enum import Enum


class EnumAggregationOperator(str, Enum):
    """Aggregations a query may carry in its single aggregation slot."""

    COUNT = "count"
    SUM = "sum"
    AVG = "avg"
    MIN = "min"
    MAX = "max"
    PLUCK = "pluck"
    WITHOUT = "without"
    DISTINCT = "distinct"


__all__ = ["EnumAggregationOperator"]
