# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Filter chain operator enumeration.

Values are the operator tokens understood by the remote query engine.
"""

from enum import Enum


class EnumFilterOperator(str, Enum):
    """Predicate operators that can be appended to a filter chain."""

    LT = "<"
    GT = ">"
    LTE = "<="
    GTE = ">="
    EQ = "=="
    MATCH = "match"
    CONTAINS = "contains"
    HAS_FIELDS = "has_fields"


__all__ = ["EnumFilterOperator"]
