# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Geospatial query operation model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, JsonValue

from sondra_client.enums import EnumGeoOperator
from sondra_client.utils.util_frozen_mapping import FrozenJsonMapping


class ModelGeoOp(BaseModel):
    """The single geospatial operation of a query."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    op: EnumGeoOperator
    args: tuple[JsonValue, ...] = ()
    kwargs: Optional[FrozenJsonMapping] = None
    against: Optional[str] = None

    def render(self) -> dict[str, JsonValue]:
        rendered: dict[str, JsonValue] = {"op": self.op.value, "args": list(self.args)}
        if self.kwargs is not None:
            rendered["kwargs"] = dict(self.kwargs)
        if self.against:
            rendered["against"] = self.against
        return rendered

    @classmethod
    def from_plain(cls, data: Mapping[str, JsonValue]) -> ModelGeoOp:
        kwargs = data.get("kwargs")
        against = data.get("against")
        return cls(
            op=EnumGeoOperator(data["op"]),
            args=tuple(data.get("args") or ()),
            kwargs=dict(kwargs) if isinstance(kwargs, dict) else None,
            against=str(against) if against else None,
        )


__all__ = ["ModelGeoOp"]
