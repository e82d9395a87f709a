# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

This conftest.py automatically applies the `unit` marker to all tests
in the tests/unit/ directory hierarchy and provides the request contexts
most unit tests start from.

Marker Application:
    All tests under tests/unit/** are automatically marked with:
    - pytest.mark.unit

    NOTE: pytestmark at module-level in conftest.py does NOT automatically
    apply to tests in other files. We use pytest_collection_modifyitems hook
    instead to dynamically mark all tests in the unit directory.

This enables selective test execution:
    # Run only unit tests
    pytest -m unit
"""

import pytest

from sondra_client.models import ModelRequestContext, ModelRobustConfig


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Dynamically add unit marker to all tests in the unit directory."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)


@pytest.fixture
def root_context() -> ModelRequestContext:
    """Suite root at ``http://localhost:5000/api`` with no retry delay."""
    return ModelRequestContext(
        robust=ModelRobustConfig(max_tries=3, refetch_delay_seconds=0.0)
    ).suite("http", "localhost", 5000)


@pytest.fixture
def tickets(root_context: ModelRequestContext) -> ModelRequestContext:
    return root_context.app("core").collection("tickets")
