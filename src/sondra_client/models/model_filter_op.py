# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Filter chain operation model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from sondra_client.enums import EnumFilterOperator


class ModelFilterOp(BaseModel):
    """One predicate in a query's filter chain.

    Comparison, ``match`` and ``contains`` operations carry ``lhs``, ``rhs``
    and ``default_on_missing`` (the value the predicate takes when a document
    lacks the field). ``has_fields`` carries only ``field_names``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    op: EnumFilterOperator
    lhs: JsonValue = None
    rhs: JsonValue = None
    default_on_missing: bool = False
    field_names: Optional[tuple[str, ...]] = Field(
        default=None,
        description="Field names required by a has_fields predicate",
    )

    def render(self) -> dict[str, JsonValue]:
        """Render to the structure the remote query engine expects."""
        if self.op is EnumFilterOperator.HAS_FIELDS:
            return {"op": self.op.value, "fields": list(self.field_names or ())}
        return {
            "op": self.op.value,
            "lhs": self.lhs,
            "rhs": self.rhs,
            "default": self.default_on_missing,
        }

    @classmethod
    def from_plain(cls, data: Mapping[str, JsonValue]) -> ModelFilterOp:
        """Rebuild a filter operation from its rendered structure."""
        op = EnumFilterOperator(data["op"])
        if op is EnumFilterOperator.HAS_FIELDS:
            raw_fields = data.get("fields") or []
            return cls(op=op, field_names=tuple(str(f) for f in raw_fields))
        return cls(
            op=op,
            lhs=data.get("lhs"),
            rhs=data.get("rhs"),
            default_on_missing=bool(data.get("default", False)),
        )


__all__ = ["ModelFilterOp"]
