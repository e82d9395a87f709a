# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Error Context Configuration Model.

Bundles the structured fields shared by every client error so that error
constructors keep a short, strongly-typed parameter list.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelClientErrorContext(BaseModel):
    """Structured context attached to client errors.

    Attributes:
        operation: Operation being performed (execute, probe, robust_call, ...)
        target_name: Target URL or resource name
        request_id: Logical-call identifier of a resilient call, when known
        correlation_id: Optional caller-supplied correlation ID

    Example:
        >>> context = ModelClientErrorContext(
        ...     operation="execute",
        ...     target_name="http://localhost:5000/api/auth;format=json",
        ... )
        >>> raise TransientNetworkError("Connection refused", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (execute, probe, robust_call, ...)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target URL or resource name",
    )
    request_id: Optional[int] = Field(
        default=None,
        description="Logical-call identifier shared by every retry of a resilient call",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Caller-supplied correlation ID for tracing",
    )


__all__ = ["ModelClientErrorContext"]
