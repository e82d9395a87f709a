# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Read-only mapping fields for frozen models.

``ConfigDict(frozen=True)`` only blocks attribute assignment. A ``dict`` field
can still be changed in place, and since derived models share unchanged
fields with their parent, an in-place change would leak into every model
derived from it. The annotated types here store a private copy of the mapping
behind a ``MappingProxyType`` and dump it back to a plain ``dict``.

Usage Pattern:
    >>> class Headers(BaseModel):
    ...     model_config = ConfigDict(frozen=True)
    ...     values: FrozenStrMapping = Field(default_factory=dict)
    >>> Headers(values={"X-A": "1"}).values["X-A"] = "2"
    Traceback (most recent call last):
    ...
    TypeError: 'mappingproxy' object does not support item assignment

Only the top level is read-only. Nested JSON containers stay plain values.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, JsonValue, PlainSerializer

V = TypeVar("V")


def freeze_mapping(value: Mapping[str, V]) -> Mapping[str, V]:
    """Return a read-only view over a private copy of ``value``."""
    return MappingProxyType(dict(value))


def thaw_mapping(value: Mapping[str, Any]) -> dict[str, Any]:
    return dict(value)


FrozenStrMapping = Annotated[
    Mapping[str, str],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
FrozenJsonMapping = Annotated[
    Mapping[str, JsonValue],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
FrozenOptionsMapping = Annotated[
    Mapping[str, Any],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]


__all__: list[str] = [
    "FrozenJsonMapping",
    "FrozenOptionsMapping",
    "FrozenStrMapping",
    "freeze_mapping",
    "thaw_mapping",
]
