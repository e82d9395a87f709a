# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Error Classes.

Error Hierarchy:
    SondraClientError (base client error)
    ├── ConfigurationError
    ├── TransientNetworkError (no response obtained, status 0)
    │   └── OfflineError
    └── ApplicationError (response received with a failure status)
        └── ResponseDecodeError

All errors:
    - Carry a human-readable ``message``
    - Accept ModelClientErrorContext for bundled context parameters
    - Keep additional keyword context in ``extra``
    - Support proper error chaining with ``raise ... from e``

Transient errors are retried by resilient calls. Application errors are
deterministic and are never retried.
"""

from __future__ import annotations

from typing import Optional

from pydantic import JsonValue

from sondra_client.errors.model_client_error_context import ModelClientErrorContext


class SondraClientError(Exception):
    """Base error class for the client.

    Example:
        >>> context = ModelClientErrorContext(operation="execute")
        >>> raise SondraClientError("Request failed", context=context, attempt=3)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelClientErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize SondraClientError.

        Args:
            message: Human-readable error message
            context: Bundled client context (operation, target, request id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context if context is not None else ModelClientErrorContext()
        self.extra: dict[str, object] = dict(extra_context)

    @property
    def request_id(self) -> Optional[int]:
        """Logical-call identifier, set on errors raised by resilient calls."""
        return self.context.request_id

    @property
    def url(self) -> Optional[str]:
        """URL of the failed request, when known."""
        return self.context.target_name

    def __str__(self) -> str:
        parts = [self.message]
        if self.context.request_id is not None:
            parts.append(f"request_id={self.context.request_id}")
        if self.context.target_name is not None:
            parts.append(f"url={self.context.target_name}")
        return " ".join(parts)


class ConfigurationError(SondraClientError):
    """Raised for invalid configuration, including an unknown failure policy.

    Configuration errors are fatal and never retried.
    """


class TransientNetworkError(SondraClientError):
    """Raised when no response was obtained from the origin.

    Covers failed liveness probes, refused connections and timeouts. The
    ``status`` is always 0 and ``error`` holds the underlying exception.
    """

    status: int = 0

    def __init__(
        self,
        message: str,
        error: Optional[BaseException] = None,
        context: Optional[ModelClientErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize TransientNetworkError.

        Args:
            message: Human-readable error message
            error: The raw transport exception, if any
            context: Bundled client context
            **extra_context: Additional context information
        """
        super().__init__(message, context=context, **extra_context)
        self.error = error


class OfflineError(TransientNetworkError):
    """Raised when the host environment reports that there is no network.

    Resilient calls treat it exactly like any other transient error.
    """


class ApplicationError(SondraClientError):
    """Raised when the origin answered with a failure status.

    ``status`` is the HTTP status code and ``error`` the parsed error body
    (JSON when the body parses, text otherwise).

    Example:
        >>> raise ApplicationError(
        ...     "Request rejected by origin",
        ...     status=403,
        ...     error={"reason": "bad credentials"},
        ... )
    """

    def __init__(
        self,
        message: str,
        status: int,
        error: JsonValue = None,
        context: Optional[ModelClientErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ApplicationError.

        Args:
            message: Human-readable error message
            status: HTTP status code of the response
            error: Parsed response body
            context: Bundled client context
            **extra_context: Additional context information
        """
        super().__init__(message, context=context, **extra_context)
        self.status = status
        self.error = error

    def __str__(self) -> str:
        return f"{super().__str__()} status={self.status}"


class ResponseDecodeError(ApplicationError):
    """Raised when a successful response carries a body that is not JSON."""


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "OfflineError",
    "ResponseDecodeError",
    "SondraClientError",
    "TransientNetworkError",
]
