# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for sondra_client tests."""

from __future__ import annotations

import asyncio

import pytest

SONDRA_ENV_VARS: tuple[str, ...] = (
    "SONDRA_PROTOCOL",
    "SONDRA_HOST",
    "SONDRA_PORT",
    "SONDRA_BASE_PATH",
    "SONDRA_TIMEOUT",
    "SONDRA_MAX_TRIES",
    "SONDRA_REFETCH_DELAY",
    "SONDRA_PING_PATH",
)


# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_async_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required async methods."""
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        method = getattr(obj, method_name)
        assert asyncio.iscoroutinefunction(
            method
        ), f"{name}.{method_name} must be async (coroutine function)"


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def clean_sondra_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``SONDRA_*`` variable so defaults apply."""
    for name in SONDRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
