# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport handlers for the sondra_client package."""

from sondra_client.handlers.handler_http_exchange import send_request

__all__: list[str] = ["send_request"]
