# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Services for the sondra_client package.

Exports:
    ServiceRequestIdAllocator: Thread-safe logical-call id counter
    ServiceConnectivityProbe: Origin liveness probe
    ConnectivitySignalUnknown: Default connectivity signal
    ServiceRequestExecutor: Single and resilient request execution
    log_transient_error: Default transient error observer
"""

from sondra_client.services.service_connectivity_probe import (
    ConnectivitySignalUnknown,
    ServiceConnectivityProbe,
)
from sondra_client.services.service_request_executor import (
    ServiceRequestExecutor,
    log_transient_error,
)
from sondra_client.services.service_request_id_allocator import (
    ServiceRequestIdAllocator,
)

__all__: list[str] = [
    "ConnectivitySignalUnknown",
    "ServiceConnectivityProbe",
    "ServiceRequestExecutor",
    "ServiceRequestIdAllocator",
    "log_transient_error",
]
