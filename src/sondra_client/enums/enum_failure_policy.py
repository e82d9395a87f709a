# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Failure policy enumeration for resilient calls.

Selects what a resilient call does when a physical attempt fails without
obtaining a response from the origin.
"""

from enum import Enum


class EnumFailurePolicy(str, Enum):
    """Action taken on a response-less transport failure.

    Attributes:
        DEFER: Notify the transient-error observer, wait, and retry.
        FAIL: Reject the logical call with status 0.
        IGNORE: Resolve the logical call with ``None``.
    """

    DEFER = "defer"
    FAIL = "fail"
    IGNORE = "ignore"


__all__ = ["EnumFailurePolicy"]
