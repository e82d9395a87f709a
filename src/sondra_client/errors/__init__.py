# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Errors Module.

Exports:
    ModelClientErrorContext: Configuration model for bundled error context
    SondraClientError: Base client error class
    ConfigurationError: Invalid configuration or failure policy
    TransientNetworkError: No response obtained (retryable)
    OfflineError: Host environment reports no connectivity (retryable)
    ApplicationError: Response received with a failure status (terminal)
    ResponseDecodeError: Successful response with an undecodable body (terminal)

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Bearer tokens or Authorization header values
        - Request bodies containing credentials

    SAFE to include:
        - URLs (they never carry credentials in this client)
        - Status codes, request ids, attempt counts
"""

from sondra_client.errors.client_errors import (
    ApplicationError,
    ConfigurationError,
    OfflineError,
    ResponseDecodeError,
    SondraClientError,
    TransientNetworkError,
)
from sondra_client.errors.model_client_error_context import ModelClientErrorContext

__all__: list[str] = [
    "ApplicationError",
    "ConfigurationError",
    "ModelClientErrorContext",
    "OfflineError",
    "ResponseDecodeError",
    "SondraClientError",
    "TransientNetworkError",
]
