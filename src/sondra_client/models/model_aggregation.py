# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Aggregation operation model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, JsonValue

from sondra_client.enums import EnumAggregationOperator
from sondra_client.utils.util_frozen_mapping import FrozenJsonMapping


class ModelAggregation(BaseModel):
    """The single aggregation of a query. ``args``/``kwargs`` are optional."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    op: EnumAggregationOperator
    args: Optional[tuple[JsonValue, ...]] = None
    kwargs: Optional[FrozenJsonMapping] = None

    def render(self) -> dict[str, JsonValue]:
        rendered: dict[str, JsonValue] = {"op": self.op.value}
        if self.args is not None:
            rendered["args"] = list(self.args)
        if self.kwargs is not None:
            rendered["kwargs"] = dict(self.kwargs)
        return rendered

    @classmethod
    def from_plain(cls, data: Mapping[str, JsonValue]) -> ModelAggregation:
        args = data.get("args")
        kwargs = data.get("kwargs")
        return cls(
            op=EnumAggregationOperator(data["op"]),
            args=tuple(args) if isinstance(args, list) else None,
            kwargs=dict(kwargs) if isinstance(kwargs, dict) else None,
        )


__all__ = ["ModelAggregation"]
