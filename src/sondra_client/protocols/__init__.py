# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for the sondra_client package."""

from sondra_client.protocols.protocol_connectivity_signal import (
    ProtocolConnectivitySignal,
)
from sondra_client.protocols.protocol_transient_error_observer import (
    ProtocolTransientErrorObserver,
)

__all__: list[str] = [
    "ProtocolConnectivitySignal",
    "ProtocolTransientErrorObserver",
]
