# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Sondra Client - Immutable request contexts for document API suites.

This package provides a client for applications that expose collections of
documents and callable methods over HTTP, including:

- Immutable, composable request contexts and query descriptors
- Verb-dependent request encoding (query string for GET, JSON otherwise)
- Resilient logical calls that probe origin liveness and retry
  transient network failures under a configurable failure policy
- Typed errors separating transient failures from application failures

Key Components:
    - ModelRequestContext: Navigation, configuration and single attempts
    - ModelQueryDescriptor: Key selection, filters, geo, window, aggregation
    - ServiceRequestExecutor: Client lifecycle and ``robust_call``
    - ModelClientConfig: Environment and YAML configuration
"""

from sondra_client.enums import EnumConnectivityState, EnumFailurePolicy
from sondra_client.errors import (
    ApplicationError,
    ConfigurationError,
    OfflineError,
    ResponseDecodeError,
    SondraClientError,
    TransientNetworkError,
)
from sondra_client.models import (
    ModelClientConfig,
    ModelDeferredResult,
    ModelQueryDescriptor,
    ModelRequestContext,
    ModelRequestOverrides,
    ModelRobustConfig,
)
from sondra_client.services import (
    ServiceConnectivityProbe,
    ServiceRequestExecutor,
    ServiceRequestIdAllocator,
)

__all__: list[str] = [
    "ApplicationError",
    "ConfigurationError",
    "EnumConnectivityState",
    "EnumFailurePolicy",
    "ModelClientConfig",
    "ModelDeferredResult",
    "ModelQueryDescriptor",
    "ModelRequestContext",
    "ModelRequestOverrides",
    "ModelRobustConfig",
    "OfflineError",
    "ResponseDecodeError",
    "ServiceConnectivityProbe",
    "ServiceRequestExecutor",
    "ServiceRequestIdAllocator",
    "SondraClientError",
    "TransientNetworkError",
]
