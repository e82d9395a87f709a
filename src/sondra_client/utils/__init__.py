# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the sondra_client package."""

from sondra_client.utils.util_env_parsing import parse_env_float, parse_env_int
from sondra_client.utils.util_frozen_mapping import (
    FrozenJsonMapping,
    FrozenOptionsMapping,
    FrozenStrMapping,
    freeze_mapping,
    thaw_mapping,
)
from sondra_client.utils.util_url import (
    append_query,
    build_ping_url,
    build_url,
    encode_form,
    format_scalar,
    render_format_params,
)

__all__: list[str] = [
    "FrozenJsonMapping",
    "FrozenOptionsMapping",
    "FrozenStrMapping",
    "append_query",
    "build_ping_url",
    "build_url",
    "encode_form",
    "format_scalar",
    "freeze_mapping",
    "parse_env_float",
    "parse_env_int",
    "render_format_params",
    "thaw_mapping",
]
