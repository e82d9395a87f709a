# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transient error observer protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sondra_client.errors import TransientNetworkError


@runtime_checkable
class ProtocolTransientErrorObserver(Protocol):
    """Callback invoked before each retry delay of a resilient call.

    Receives the logical call's request id, the request URL and the
    transient error that caused the deferral.
    """

    def __call__(
        self, request_id: int, url: str, error: TransientNetworkError
    ) -> None: ...


__all__ = ["ProtocolTransientErrorObserver"]
