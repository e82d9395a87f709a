# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host connectivity signal protocol.

Abstracts the host environment's best-effort connectivity introspection so
the liveness probe can be exercised without a real network stack.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sondra_client.enums import EnumConnectivityState


@runtime_checkable
class ProtocolConnectivitySignal(Protocol):
    """Read-only source of the host's connectivity state."""

    def connectivity(self) -> EnumConnectivityState:
        """Return the current connectivity state.

        ``UNKNOWN`` when the environment exposes no signal.
        """
        ...


__all__ = ["ProtocolConnectivitySignal"]
