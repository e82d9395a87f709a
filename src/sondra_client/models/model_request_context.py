# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Context Model.

The basic principle is immutability and context: a root context is
configured once for an application suite, and every navigation or
configuration method returns a new context. Unchanged fields are shared
between a context and the contexts derived from it, so keeping many of them
around is cheap.

Example:
    >>> suite = ModelRequestContext().suite("http", "localhost", 5000)
    >>> login = suite.app("auth").method("login")
    >>> login.url
    'http://localhost:5000/api/auth.login;format=json'
    >>> rsp = await login.call_with({"username": "u", "password": "p"})
    >>> core = suite.app("core").auth(rsp["_"])  # derived contexts keep the header
    >>> tickets = await core.collection("tickets").execute()

Verb-dependent encoding:
    GET requests cannot carry a body, so the body fields and the plain query
    render are URL-form-encoded into the query string. Every other verb sends
    the body fields merged with the wire query render as a JSON payload.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, overload

import httpx
from pydantic import BaseModel, ConfigDict, Field, JsonValue, computed_field

from sondra_client.enums import EnumResponseFormat
from sondra_client.handlers.handler_http_exchange import send_request
from sondra_client.models.model_query_descriptor import ModelQueryDescriptor
from sondra_client.models.model_request_overrides import ModelRequestOverrides
from sondra_client.models.model_robust_config import ModelRobustConfig
from sondra_client.utils.util_frozen_mapping import (
    FrozenJsonMapping,
    FrozenOptionsMapping,
    FrozenStrMapping,
    freeze_mapping,
)
from sondra_client.utils.util_url import (
    append_query,
    build_ping_url,
    build_url,
    encode_form,
)

if TYPE_CHECKING:
    from sondra_client.models.model_client_config import ModelClientConfig

logger = logging.getLogger(__name__)

_DEFAULT_BASE_PATH: tuple[str, ...] = ("api",)
_MAPPING_FIELDS: frozenset[str] = frozenset(
    {"headers", "params", "body", "additional_request_options"}
)


def _default_params() -> dict[str, JsonValue]:
    return {"format": EnumResponseFormat.JSON.value}


def _format_name(name: str | EnumResponseFormat) -> str:
    if isinstance(name, EnumResponseFormat):
        return name.value
    return name


class ModelRequestContext(BaseModel):
    """Immutable descriptor of a request against a document API suite.

    Attributes:
        protocol: URL scheme
        host: Origin host name
        port: Origin port
        base_path: Path segments preceding the app
        app_name: Selected application
        collection_name: Selected collection within the app
        document_key: Selected document within the collection
        method_name: Selected callable method
        request_method: HTTP verb; becomes POST when a method is selected
        headers: Request headers in insertion order, names case-sensitive.
            This and the other mapping fields are read-only views.
        params: Response format params rendered into the URL suffix
        body: Pending body fields
        query_descriptor: Attached query
        additional_request_options: Extra ``httpx.AsyncClient.request`` keyword
            arguments, applied last so they can override any computed option
        robust: Resilience tuning for resilient calls
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    protocol: str = "https"
    host: str = "localhost"
    port: int = 443
    base_path: tuple[str, ...] = Field(default=_DEFAULT_BASE_PATH)
    app_name: Optional[str] = None
    collection_name: Optional[str] = None
    document_key: Optional[str | int] = None
    method_name: Optional[str] = None
    request_method: str = "GET"
    headers: FrozenStrMapping = Field(default_factory=dict, validate_default=True)
    params: FrozenJsonMapping = Field(
        default_factory=_default_params, validate_default=True
    )
    body: FrozenJsonMapping = Field(default_factory=dict, validate_default=True)
    query_descriptor: ModelQueryDescriptor = Field(default_factory=ModelQueryDescriptor)
    additional_request_options: FrozenOptionsMapping = Field(
        default_factory=dict, validate_default=True
    )
    robust: ModelRobustConfig = Field(default_factory=ModelRobustConfig)

    @classmethod
    def from_config(cls, config: ModelClientConfig) -> ModelRequestContext:
        """Build a root context from client configuration."""
        return cls(
            protocol=config.protocol,
            host=config.host,
            port=config.port,
            base_path=config.base_path,
            robust=config.robust,
        )

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> ModelRequestContext:
        """Copy the context; mapping fields in ``update`` are stored read-only.

        ``model_copy`` skips validation, so the mapping fields are frozen here
        for every builder that derives a context.
        """
        if update:
            update = {
                name: freeze_mapping(value)
                if name in _MAPPING_FIELDS and value is not None
                else value
                for name, value in update.items()
            }
        return super().model_copy(update=update, deep=deep)

    # ── Derived values ───────────────────────────────────────────────────

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Absolute URL, derived from the connection target and selectors."""
        return build_url(
            self.protocol,
            self.host,
            self.port,
            self.base_path,
            self.app_name,
            self.collection_name,
            self.document_key,
            self.method_name,
            self.params,
        )

    @property
    def ping_url(self) -> str:
        """Liveness probe URL of the origin."""
        return build_ping_url(self.protocol, self.host, self.port, self.robust.ping_path)

    # ── Navigation ───────────────────────────────────────────────────────

    def suite(
        self,
        protocol: str = "https",
        host: str = "localhost",
        port: int = 443,
        base_path: Optional[tuple[str, ...] | list[str]] = None,
    ) -> ModelRequestContext:
        """Rebind the connection target."""
        update: dict[str, object] = {"protocol": protocol, "host": host, "port": port}
        if base_path is not None:
            update["base_path"] = tuple(base_path)
        return self.model_copy(update=update)

    def app(self, name: str) -> ModelRequestContext:
        return self.model_copy(
            update={
                "app_name": name,
                "collection_name": None,
                "document_key": None,
                "method_name": None,
                "body": {},
            }
        )

    def collection(self, name: str) -> ModelRequestContext:
        return self.model_copy(
            update={
                "collection_name": name,
                "document_key": None,
                "method_name": None,
                "body": {},
            }
        )

    def document(self, key: str | int) -> ModelRequestContext:
        return self.model_copy(
            update={"document_key": key, "method_name": None, "body": {}}
        )

    def method(self, name: str) -> ModelRequestContext:
        """Select a callable method. Methods are invoked with POST by default."""
        return self.model_copy(
            update={"request_method": "POST", "method_name": name, "body": {}}
        )

    # ── Configuration ────────────────────────────────────────────────────

    def auth(self, token: str) -> ModelRequestContext:
        """Attach a bearer token. Every context derived from the result keeps it."""
        return self.with_header("Authorization", f"Bearer {token}")

    def with_header(self, name: str, value: str) -> ModelRequestContext:
        return self.model_copy(update={"headers": {**self.headers, name: value}})

    def format(
        self,
        name: str | EnumResponseFormat = EnumResponseFormat.JSON,
        options: Optional[dict[str, JsonValue]] = None,
    ) -> ModelRequestContext:
        """Set the response format and merge extra format options into params."""
        params: dict[str, JsonValue] = {**self.params, "format": _format_name(name)}
        params.update(options or {})
        return self.model_copy(update={"params": params})

    def with_request_method(self, verb: str) -> ModelRequestContext:
        return self.model_copy(update={"request_method": verb.upper()})

    def with_body(self, body: dict[str, JsonValue]) -> ModelRequestContext:
        return self.model_copy(update={"body": dict(body)})

    def with_overrides(
        self, overrides: Optional[ModelRequestOverrides]
    ) -> ModelRequestContext:
        """Apply per-call overrides, returning the context a call actually uses."""
        if overrides is None:
            return self
        update = overrides.as_update()
        if not update:
            return self
        return self.model_copy(update=update)

    @overload
    def query(self, descriptor: None = None) -> ModelQueryDescriptor: ...

    @overload
    def query(self, descriptor: ModelQueryDescriptor) -> ModelRequestContext: ...

    def query(
        self, descriptor: Optional[ModelQueryDescriptor] = None
    ) -> ModelQueryDescriptor | ModelRequestContext:
        """Return the attached query, or attach ``descriptor`` to a new context."""
        if descriptor is None:
            return self.query_descriptor
        return self.model_copy(update={"query_descriptor": descriptor})

    # ── Execution ────────────────────────────────────────────────────────

    def build_request(
        self, overrides: Optional[ModelRequestOverrides] = None
    ) -> dict[str, Any]:
        """Build the keyword arguments for ``httpx.AsyncClient.request``.

        Overrides apply to this request only. ``additional_request_options``
        are merged last and win over every computed option.
        """
        ctx = self.with_overrides(overrides)
        verb = ctx.request_method.upper()
        options: dict[str, Any] = {"method": verb, "headers": dict(ctx.headers)}

        if verb == "GET":
            fields = {**ctx.body, **ctx.query_descriptor.render_plain()}
            options["url"] = append_query(ctx.url, encode_form(fields))
        else:
            payload = {**ctx.body, **ctx.query_descriptor.render_wire()}
            options["url"] = ctx.url
            if payload:
                options["json"] = payload

        options.update(ctx.additional_request_options)
        return options

    async def execute(
        self,
        overrides: Optional[ModelRequestOverrides] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        """Make a single physical attempt and return the parsed response body.

        Args:
            overrides: Fields replaced for this call only
            client: Client to send through. When omitted a short-lived client
                is created for the call.

        Raises:
            ApplicationError: The origin answered with a non-2xx status.
            TransientNetworkError: No response was obtained (status 0).
        """
        options = self.build_request(overrides)
        logger.debug(
            "Executing request",
            extra={"method": options["method"], "url": options["url"]},
        )
        if client is not None:
            return await send_request(client, options)
        async with httpx.AsyncClient() as owned_client:
            return await send_request(owned_client, options)

    async def call_with(
        self,
        body: Optional[dict[str, JsonValue]] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        """Execute with ``body`` as the request body."""
        overrides = ModelRequestOverrides(body=body) if body else None
        return await self.execute(overrides, client=client)

    async def fetch_document(
        self,
        key: str | int,
        overrides: Optional[ModelRequestOverrides] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        return await self.document(key).execute(overrides, client=client)

    async def delete_document(
        self, key: str | int, *, client: Optional[httpx.AsyncClient] = None
    ) -> JsonValue:
        overrides = ModelRequestOverrides(request_method="DELETE")
        return await self.document(key).execute(overrides, client=client)

    async def patch_document(
        self,
        key: str | int,
        values: dict[str, JsonValue],
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        overrides = ModelRequestOverrides(request_method="PATCH", body=values)
        return await self.document(key).execute(overrides, client=client)

    async def replace_document(
        self,
        key: str | int,
        replacement: dict[str, JsonValue],
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        overrides = ModelRequestOverrides(request_method="PUT", body=replacement)
        return await self.document(key).execute(overrides, client=client)

    async def create_document(
        self,
        key: str | int,
        doc: dict[str, JsonValue],
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        overrides = ModelRequestOverrides(request_method="POST", body=doc)
        return await self.document(key).execute(overrides, client=client)

    async def fetch_schema(
        self,
        schema_options: Optional[dict[str, JsonValue]] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> JsonValue:
        """Fetch the schema of the selected resource.

        The caller's options replace the current format params and ``format``
        is then forced to ``schema``.
        """
        params: dict[str, JsonValue] = {
            **(schema_options or {}),
            "format": EnumResponseFormat.SCHEMA.value,
        }
        return await self.model_copy(update={"params": params}).execute(client=client)


__all__ = ["ModelRequestContext"]
