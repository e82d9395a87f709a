# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Executor Service.

Owns the HTTP client used to talk to the origin and runs resilient logical
calls on top of single physical attempts.

A resilient call is an explicit state machine over ``EnumCallState``::

    PROBING  --probe ok-------------------------> SENDING
    PROBING  --probe failed (observer)----------> DEFERRED
    SENDING  --2xx------------------------------> RESOLVED
    SENDING  --non-2xx--------------------------> REJECTED (raised)
    SENDING  --no response, fail----------------> REJECTED (raised)
    SENDING  --no response, ignore--------------> RESOLVED (None)
    SENDING  --no response, defer (observer)----> DEFERRED
    DEFERRED --refetch delay elapsed------------> PROBING

Only transport failures after a successful probe consume an attempt. Once
``max_tries`` attempts have been consumed the next attempt runs under the
``fail`` policy, so a call makes at most ``max_tries + 1`` physical attempts
before raising (two when ``max_tries`` is 0). A failing probe re-probes
indefinitely.

Example:
    >>> config = ModelClientConfig.from_env()
    >>> root = ModelRequestContext.from_config(config)
    >>> async with ServiceRequestExecutor.from_config(config) as executor:
    ...     tickets = root.app("core").collection("tickets")
    ...     result = await executor.robust_call(tickets)
    ...     print(result.request_id, result.data)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

import httpx
from pydantic import JsonValue

from sondra_client.enums import EnumCallState, EnumFailurePolicy
from sondra_client.errors import (
    ApplicationError,
    ConfigurationError,
    ModelClientErrorContext,
    TransientNetworkError,
)
from sondra_client.handlers.handler_http_exchange import send_request
from sondra_client.models.model_deferred_request import ModelDeferredRequest
from sondra_client.models.model_deferred_result import ModelDeferredResult
from sondra_client.services.service_connectivity_probe import ServiceConnectivityProbe
from sondra_client.services.service_request_id_allocator import (
    ServiceRequestIdAllocator,
)

if TYPE_CHECKING:
    from sondra_client.models import (
        ModelClientConfig,
        ModelRequestContext,
        ModelRequestOverrides,
    )
    from sondra_client.protocols import ProtocolTransientErrorObserver

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 30.0


def log_transient_error(
    request_id: int, url: str, error: TransientNetworkError
) -> None:
    """Default transient error observer: log a warning and keep retrying."""
    logger.warning(
        "Transient network error, deferring request",
        extra={
            "request_id": request_id,
            "url": url,
            "error_type": type(error).__name__,
            "error": error.message,
        },
    )


def _coerce_policy(action_on_fail: EnumFailurePolicy | str) -> EnumFailurePolicy:
    try:
        return EnumFailurePolicy(action_on_fail)
    except ValueError as e:
        valid = ", ".join(p.value for p in EnumFailurePolicy)
        raise ConfigurationError(
            f"Invalid failure policy {action_on_fail!r}, expected one of: {valid}",
            context=ModelClientErrorContext(operation="robust_call"),
        ) from e


class ServiceRequestExecutor:
    """Executes request contexts against their origin.

    Args:
        http_client: Pre-configured client. When provided the caller keeps
            ownership and must close it. When omitted a client is created
            lazily on first use and closed by :meth:`aclose`.
        probe: Liveness probe run before every resilient attempt
        id_allocator: Source of logical-call ids
        timeout_seconds: Timeout of the lazily created client
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        probe: Optional[ServiceConnectivityProbe] = None,
        id_allocator: Optional[ServiceRequestIdAllocator] = None,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._probe = probe if probe is not None else ServiceConnectivityProbe()
        self._id_allocator = (
            id_allocator if id_allocator is not None else ServiceRequestIdAllocator()
        )
        self._timeout_seconds = timeout_seconds

        self._http_client_lock = asyncio.Lock()
        if http_client is not None:
            self._http_client: Optional[httpx.AsyncClient] = http_client
            self._owns_http_client = False
        else:
            self._http_client = None
            self._owns_http_client = True

    @classmethod
    def from_config(
        cls,
        config: ModelClientConfig,
        *,
        probe: Optional[ServiceConnectivityProbe] = None,
    ) -> ServiceRequestExecutor:
        """Build an executor whose client uses the configured timeout."""
        return cls(probe=probe, timeout_seconds=config.timeout_seconds)

    # ── HTTP client management ───────────────────────────────────────────

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Return the HTTP client, creating it on first use."""
        if self._http_client is not None:
            return self._http_client

        async with self._http_client_lock:
            if self._http_client is not None:
                return self._http_client

            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_seconds),
            )
            logger.debug(
                "HTTP client created",
                extra={"timeout_seconds": self._timeout_seconds},
            )
            return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client if this executor created it."""
        async with self._http_client_lock:
            if self._owns_http_client and self._http_client is not None:
                await self._http_client.aclose()
                self._http_client = None
                logger.debug("HTTP client closed")

    async def __aenter__(self) -> ServiceRequestExecutor:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Execution ────────────────────────────────────────────────────────

    async def execute(
        self,
        context: ModelRequestContext,
        overrides: Optional[ModelRequestOverrides] = None,
    ) -> JsonValue:
        """Make a single physical attempt, without probing or retries."""
        client = await self._get_http_client()
        return await context.execute(overrides, client=client)

    async def robust_call(
        self,
        context: ModelRequestContext,
        overrides: Optional[ModelRequestOverrides] = None,
        on_transient_error: Optional[ProtocolTransientErrorObserver] = None,
        action_on_fail: EnumFailurePolicy | str = EnumFailurePolicy.DEFER,
    ) -> Optional[ModelDeferredResult]:
        """Run one logical call that survives transient network failures.

        Args:
            context: Request to perform
            overrides: Fields replaced for every attempt of this call
            on_transient_error: Called with ``(request_id, url, error)`` before
                each retry delay. Defaults to :func:`log_transient_error`.
            action_on_fail: Policy applied to a transport failure

        Returns:
            The response body with the call's request id, or ``None`` when
            the ``ignore`` policy swallowed a transport failure.

        Raises:
            ConfigurationError: ``action_on_fail`` is not a known policy.
            ApplicationError: The origin answered with a failure status.
            TransientNetworkError: A transport failure under the ``fail``
                policy.
        """
        policy = _coerce_policy(action_on_fail)
        observer = on_transient_error or log_transient_error

        ctx = context.with_overrides(overrides)
        robust = ctx.robust
        url = ctx.url
        options = ctx.build_request()
        client = await self._get_http_client()

        request = ModelDeferredRequest(
            request_id=self._id_allocator.next_id(), policy=policy
        )
        error_ctx = ModelClientErrorContext(
            operation="robust_call",
            target_name=url,
            request_id=request.request_id,
        )
        logger.debug(
            "Resilient call started",
            extra={
                "request_id": request.request_id,
                "url": url,
                "policy": policy.value,
            },
        )

        result: Optional[ModelDeferredResult] = None
        while not request.state.is_terminal:
            if request.state is EnumCallState.PROBING:
                try:
                    await self._probe.probe(ctx, client)
                except TransientNetworkError as e:
                    observer(request.request_id, url, e)
                    request = self._transition(request, EnumCallState.DEFERRED)
                    continue
                request = self._transition(request, EnumCallState.SENDING)

            elif request.state is EnumCallState.SENDING:
                try:
                    data = await send_request(client, options)
                except ApplicationError as e:
                    request = self._transition(request, EnumCallState.REJECTED)
                    raise type(e)(
                        e.message,
                        status=e.status,
                        error=e.error,
                        context=error_ctx,
                        **e.extra,
                    ) from e
                except TransientNetworkError as e:
                    if request.policy is EnumFailurePolicy.FAIL:
                        request = self._transition(request, EnumCallState.REJECTED)
                        raise TransientNetworkError(
                            e.message, error=e.error, context=error_ctx
                        ) from e
                    if request.policy is EnumFailurePolicy.IGNORE:
                        logger.debug(
                            "Transport failure ignored",
                            extra={"request_id": request.request_id, "url": url},
                        )
                        request = self._transition(request, EnumCallState.RESOLVED)
                        continue
                    observer(request.request_id, url, e)
                    request = self._transition(
                        request.next_attempt(robust.max_tries),
                        EnumCallState.DEFERRED,
                    )
                    continue
                request = self._transition(request, EnumCallState.RESOLVED)
                result = ModelDeferredResult(request_id=request.request_id, data=data)

            elif request.state is EnumCallState.DEFERRED:
                await asyncio.sleep(robust.refetch_delay_seconds)
                request = self._transition(request, EnumCallState.PROBING)

        return result

    @staticmethod
    def _transition(
        request: ModelDeferredRequest, state: EnumCallState
    ) -> ModelDeferredRequest:
        logger.debug(
            "Resilient call transition",
            extra={
                "request_id": request.request_id,
                "from_state": request.state.value,
                "to_state": state.value,
                "attempt": request.attempt,
                "policy": request.policy.value,
            },
        )
        return request.transition(state)


__all__ = ["ServiceRequestExecutor", "log_transient_error"]
