# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response format enumeration.

Well-known values of the ``format`` parameter. The remote service may accept
other names; contexts take plain strings and these members are str-valued.
"""

from enum import Enum


class EnumResponseFormat(str, Enum):
    """Response representations selectable through the ``format`` parameter."""

    JSON = "json"
    SCHEMA = "schema"


__all__ = ["EnumResponseFormat"]
