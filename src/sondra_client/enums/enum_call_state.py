# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resilient call state enumeration.

Transitions:
    PROBING -> SENDING | DEFERRED
    SENDING -> RESOLVED | REJECTED | DEFERRED
    DEFERRED -> PROBING (after the retry delay)
"""

from enum import Enum


class EnumCallState(str, Enum):
    """States of one logical resilient call."""

    PROBING = "probing"
    SENDING = "sending"
    DEFERRED = "deferred"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Return True for states that end the logical call."""
        return self in (EnumCallState.RESOLVED, EnumCallState.REJECTED)


__all__ = ["EnumCallState"]
