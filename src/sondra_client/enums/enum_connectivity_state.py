# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host connectivity state enumeration."""

from enum import Enum


class EnumConnectivityState(str, Enum):
    """Connectivity reported by the host environment.

    ``UNKNOWN`` means the environment exposes no connectivity signal; the
    liveness probe then optimistically pings the origin.
    """

    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    UNKNOWN = "unknown"


__all__ = ["EnumConnectivityState"]
