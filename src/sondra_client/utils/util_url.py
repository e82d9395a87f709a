# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""URL assembly and form encoding helpers.

URL layout::

    {protocol}://{host}:{port}/{base_path...}[/{app}[/{collection}[/{document}]]][.{method}];{key}={value}[;...]

The semicolon-joined suffix is rendered from the format params in insertion
order. Each key and value is HTML-escaped and then percent-encoded, so
reserved characters such as ``?`` and ``#`` stay inside the path.
"""

from __future__ import annotations

import html
import json
from collections.abc import Iterable, Mapping
from urllib.parse import quote, urlencode

from pydantic import JsonValue


def format_scalar(value: object) -> str:
    """Render a scalar the way the remote service expects it in URLs.

    Booleans render as ``true``/``false`` and ``None`` as ``null``.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def _escape_param(value: object) -> str:
    return quote(html.escape(format_scalar(value), quote=False), safe="&;=")


def render_format_params(params: Mapping[str, JsonValue]) -> str:
    """Render format params as ``k=v`` pairs joined by ``;``."""
    return ";".join(
        f"{_escape_param(k)}={_escape_param(v)}" for k, v in params.items()
    )


def build_url(
    protocol: str,
    host: str,
    port: int | str,
    base_path: Iterable[str],
    app: str | None,
    collection: str | None,
    document: str | int | None,
    method: str | None,
    params: Mapping[str, JsonValue],
) -> str:
    """Build the absolute URL of a resource.

    Each selector is present only if selected; the method is appended as a
    ``.method`` suffix to whatever selector is finest.

    Example:
        >>> build_url("http", "localhost", 5000, ["api"], "auth", None, None,
        ...           "login", {"format": "json"})
        'http://localhost:5000/api/auth.login;format=json'
    """
    url = f"{protocol}://{host}:{port}/{'/'.join(base_path)}"
    if app:
        url += f"/{app}"
    if collection:
        url += f"/{collection}"
    if document is not None and document != "":
        url += f"/{document}"
    if method:
        url += f".{method}"
    return f"{url};{render_format_params(params)}"


def build_ping_url(protocol: str, host: str, port: int | str, ping_path: str) -> str:
    """Build the liveness probe URL of an origin."""
    return f"{protocol}://{host}:{port}{ping_path}"


def _form_value(value: JsonValue) -> str:
    # Nested structures have no form representation of their own.
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return format_scalar(value)


def encode_form(fields: Mapping[str, JsonValue]) -> str:
    """URL-form-encode a flat mapping, preserving key order."""
    return urlencode([(k, _form_value(v)) for k, v in fields.items()])


def append_query(url: str, query: str) -> str:
    """Append an encoded query string to a URL. Empty queries leave it unchanged."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


__all__ = [
    "append_query",
    "build_ping_url",
    "build_url",
    "encode_form",
    "format_scalar",
    "render_format_params",
]
