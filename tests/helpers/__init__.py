# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for sondra_client unit tests.

Available Utilities:
    Mock Helpers:
        - ScriptedOrigin: Scripted fake origin for httpx.MockTransport
        - FakeConnectivitySignal: Connectivity signal with a settable state
        - make_mock_client: Build an httpx.AsyncClient around a handler
        - json_response: Build a JSON httpx.Response

    Log Helpers:
        - filter_module_warnings: Filter log records from a module by level

Usage:
    >>> from tests.helpers import ScriptedOrigin, make_mock_client
"""

from tests.helpers.log_helpers import filter_module_warnings
from tests.helpers.mock_helpers import (
    FakeConnectivitySignal,
    ScriptedOrigin,
    json_response,
    make_mock_client,
)

__all__ = [
    "FakeConnectivitySignal",
    "ScriptedOrigin",
    "filter_module_warnings",
    "json_response",
    "make_mock_client",
]
