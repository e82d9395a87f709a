# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP exchange - one physical request/response round trip over httpx.

Maps the three possible outcomes of an exchange onto the client's contract:

    - 2xx: the parsed JSON body is returned verbatim (``None`` when empty)
    - non-2xx: ApplicationError carrying the status and the parsed error body
    - no response: TransientNetworkError with status 0 and the raw error
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import JsonValue

from sondra_client.errors import (
    ApplicationError,
    ModelClientErrorContext,
    ResponseDecodeError,
    TransientNetworkError,
)

logger = logging.getLogger(__name__)


def _parse_error_body(response: httpx.Response) -> JsonValue:
    """Parse an error body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        body: JsonValue = response.json()
    except ValueError:
        body = response.text
    return body


async def send_request(
    client: httpx.AsyncClient, options: dict[str, Any]
) -> JsonValue:
    """Send one request built by ``ModelRequestContext.build_request``.

    Args:
        client: The httpx client to send through
        options: Keyword arguments for ``httpx.AsyncClient.request``

    Returns:
        The parsed JSON response body.

    Raises:
        ApplicationError: The origin answered with a non-2xx status.
        ResponseDecodeError: A 2xx response carried a body that is not JSON.
        TransientNetworkError: No response was obtained.
    """
    method = str(options.get("method", "GET"))
    url = str(options.get("url", ""))
    ctx = ModelClientErrorContext(
        operation=f"http.{method.lower()}",
        target_name=url,
    )

    try:
        response = await client.request(**options)
    except httpx.RequestError as e:
        raise TransientNetworkError(
            f"No response from origin: {type(e).__name__}",
            error=e,
            context=ctx,
        ) from e

    if response.is_success:
        if not response.content:
            return None
        try:
            data: JsonValue = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                "Expected a JSON response body",
                status=response.status_code,
                error=response.text,
                context=ctx,
            ) from e
        return data

    logger.debug(
        "Origin rejected request",
        extra={"method": method, "url": url, "status_code": response.status_code},
    )
    raise ApplicationError(
        f"Request failed with status {response.status_code}",
        status=response.status_code,
        error=_parse_error_body(response),
        context=ctx,
    )


__all__: list[str] = ["send_request"]
