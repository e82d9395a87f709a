# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connectivity Probe Service.

Decides whether the origin is worth contacting before a resilient call
sends its real request.

Probe order:
    1. Consult the injected connectivity signal. ``UNREACHABLE`` fails
       immediately with OfflineError and no request is made.
    2. Otherwise send ``HEAD`` to the origin's ping URL. Any response,
       whatever its status, means the origin is reachable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import httpx

from sondra_client.enums import EnumConnectivityState
from sondra_client.errors import (
    ModelClientErrorContext,
    OfflineError,
    TransientNetworkError,
)

if TYPE_CHECKING:
    from sondra_client.models import ModelRequestContext
    from sondra_client.protocols import ProtocolConnectivitySignal

logger = logging.getLogger(__name__)


class ConnectivitySignalUnknown:
    """Signal for environments without connectivity introspection."""

    def connectivity(self) -> EnumConnectivityState:
        return EnumConnectivityState.UNKNOWN


class ServiceConnectivityProbe:
    """Liveness probe for a request context's origin.

    Args:
        signal: Host connectivity signal. Defaults to a signal that always
            reports ``UNKNOWN``, which defers the decision to the ping.
    """

    def __init__(self, signal: Optional[ProtocolConnectivitySignal] = None) -> None:
        self._signal: ProtocolConnectivitySignal = (
            signal if signal is not None else ConnectivitySignalUnknown()
        )

    async def probe(
        self, context: ModelRequestContext, client: httpx.AsyncClient
    ) -> None:
        """Check that the origin of ``context`` answers.

        Raises:
            OfflineError: The host reports no connectivity.
            TransientNetworkError: The ping obtained no response.
        """
        ping_url = context.ping_url
        ctx = ModelClientErrorContext(operation="probe", target_name=ping_url)

        if self._signal.connectivity() is EnumConnectivityState.UNREACHABLE:
            raise OfflineError("Host reports no network connectivity", context=ctx)

        try:
            response = await client.head(ping_url)
        except httpx.HTTPError as e:
            raise TransientNetworkError(
                f"Liveness probe failed: {type(e).__name__}",
                error=e,
                context=ctx,
            ) from e

        logger.debug(
            "Liveness probe answered",
            extra={"url": ping_url, "status_code": response.status_code},
        )


__all__ = ["ConnectivitySignalUnknown", "ServiceConnectivityProbe"]
