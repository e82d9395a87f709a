# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared mock helpers for sondra_client tests.

This module provides a scripted fake origin for ``httpx.MockTransport`` and a
controllable connectivity signal, so resilient calls can be driven through
every state without a network.

Available Utilities:
    ScriptedOrigin: MockTransport handler answering from a per-request script
    FakeConnectivitySignal: Connectivity signal with a settable state
    make_mock_client: Build an httpx.AsyncClient around a handler
    json_response: Build a JSON httpx.Response

Usage Example:
    >>> origin = ScriptedOrigin([httpx.ConnectError, json_response({"ok": 1})])
    >>> client = make_mock_client(origin)
    >>> executor = ServiceRequestExecutor(client)
    >>> result = await executor.robust_call(context)
    >>> len(origin.calls)
    2
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Union

import httpx

from sondra_client.enums import EnumConnectivityState

Outcome = Union[httpx.Response, type[httpx.RequestError]]


def json_response(
    data: object,
    status_code: int = 200,
) -> httpx.Response:
    """Build a mock httpx.Response with a JSON body."""
    return httpx.Response(status_code, json=data)


def make_mock_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient with a mock transport handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _resolve(outcome: Outcome, request: httpx.Request) -> httpx.Response:
    if isinstance(outcome, httpx.Response):
        return outcome
    raise outcome(f"scripted {outcome.__name__}", request=request)


class ScriptedOrigin:
    """MockTransport handler that plays back scripted outcomes.

    Requests to the ping path are answered from ``ping_script`` (an empty
    200 once the script is exhausted). Every other request consumes the next
    outcome of ``script``. An outcome is either a response or an
    ``httpx.RequestError`` subclass, which is raised for that request.

    Attributes:
        calls: Non-ping requests in arrival order.
        pings: Ping requests in arrival order.
    """

    def __init__(
        self,
        script: Iterable[Outcome] = (),
        *,
        ping_script: Iterable[Outcome] = (),
        ping_path: str = "/ping",
    ) -> None:
        self._script: deque[Outcome] = deque(script)
        self._ping_script: deque[Outcome] = deque(ping_script)
        self._ping_path = ping_path
        self.calls: list[httpx.Request] = []
        self.pings: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.method == "HEAD" and request.url.path == self._ping_path:
            self.pings.append(request)
            if self._ping_script:
                return _resolve(self._ping_script.popleft(), request)
            return httpx.Response(200)

        self.calls.append(request)
        if not self._script:
            raise AssertionError(f"Unscripted request: {request.method} {request.url}")
        return _resolve(self._script.popleft(), request)


class FakeConnectivitySignal:
    """Connectivity signal whose state tests can change between attempts."""

    def __init__(
        self, state: EnumConnectivityState = EnumConnectivityState.UNKNOWN
    ) -> None:
        self.state = state
        self.reads = 0

    def connectivity(self) -> EnumConnectivityState:
        self.reads += 1
        return self.state


__all__ = [
    "FakeConnectivitySignal",
    "Outcome",
    "ScriptedOrigin",
    "json_response",
    "make_mock_client",
]
