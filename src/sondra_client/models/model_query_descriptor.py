# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Query Descriptor Model.

An immutable description of the documents to retrieve from a collection:
key selection, an ordered filter chain, one geospatial operation, a window
and one aggregation. Every builder method returns a new descriptor with one
slot set or one filter appended, so descriptors can be built up step by step
and saved for later.

Filter methods stack in the order they are applied. Aggregation methods
replace each other (last write wins), as do the geospatial methods.

Nothing is validated against domain semantics here; malformed queries are
rejected by the remote service.

Example:
    >>> q = ModelQueryDescriptor().gt("age", 21).eq("status", "active").limit(5)
    >>> q.render_plain()["flt"][0]["op"]
    '>'
    >>> q.render_wire()["limit"]
    5
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from sondra_client.enums import (
    EnumAggregationOperator,
    EnumFilterOperator,
    EnumGeoOperator,
)
from sondra_client.models.model_aggregation import ModelAggregation
from sondra_client.models.model_filter_op import ModelFilterOp
from sondra_client.models.model_geo_op import ModelGeoOp

# Rendered as JSON text in the wire form.
_COMPOSITE_FIELDS: tuple[str, ...] = ("flt", "agg", "geo", "keys")
# Passed through unserialized in the wire form.
_SCALAR_FIELDS: tuple[str, ...] = ("index", "start", "limit", "end")


def _to_json_text(value: JsonValue) -> str:
    return json.dumps(value, separators=(",", ":"))


class ModelQueryDescriptor(BaseModel):
    """Immutable query specification for a collection request.

    Attributes:
        keys: Restrict results to these document keys
        key_index: Secondary index the keys refer to
        filters: Ordered, append-only filter chain
        geo_op: Single geospatial operation
        window_start: First result offset
        window_end: End of the result window
        window_limit: Maximum number of results
        aggregation: Single aggregation, last write wins
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    keys: Optional[tuple[JsonValue, ...]] = None
    key_index: Optional[str] = None
    filters: tuple[ModelFilterOp, ...] = Field(default=())
    geo_op: Optional[ModelGeoOp] = None
    window_start: Optional[int] = None
    window_end: Optional[int] = None
    window_limit: Optional[int] = None
    aggregation: Optional[ModelAggregation] = None

    # ── Key selection ────────────────────────────────────────────────────

    def for_keys(
        self, keys: list[JsonValue], index: Optional[str] = None
    ) -> ModelQueryDescriptor:
        """Limit the results to specific documents in the collection."""
        update: dict[str, object] = {"keys": tuple(keys)}
        if index:
            update["key_index"] = index
        return self.model_copy(update=update)

    # ── Filter chain ─────────────────────────────────────────────────────

    def _append_filter(self, op: ModelFilterOp) -> ModelQueryDescriptor:
        return self.model_copy(update={"filters": (*self.filters, op)})

    def _compare(
        self,
        op: EnumFilterOperator,
        lhs: JsonValue,
        rhs: JsonValue,
        default: bool,
    ) -> ModelQueryDescriptor:
        return self._append_filter(
            ModelFilterOp(op=op, lhs=lhs, rhs=rhs, default_on_missing=default)
        )

    def lt(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.LT, lhs, rhs, default)

    def gt(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.GT, lhs, rhs, default)

    def lte(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.LTE, lhs, rhs, default)

    def gte(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.GTE, lhs, rhs, default)

    def eq(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.EQ, lhs, rhs, default)

    def match(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        """Regular-expression match of ``lhs`` against ``rhs``."""
        return self._compare(EnumFilterOperator.MATCH, lhs, rhs, default)

    def contains(
        self, lhs: JsonValue, rhs: JsonValue, default: bool = False
    ) -> ModelQueryDescriptor:
        return self._compare(EnumFilterOperator.CONTAINS, lhs, rhs, default)

    def has_fields(self, fields: list[str]) -> ModelQueryDescriptor:
        """Keep only documents that have all of ``fields``."""
        return self._append_filter(
            ModelFilterOp(op=EnumFilterOperator.HAS_FIELDS, field_names=tuple(fields))
        )

    # ── Geospatial ───────────────────────────────────────────────────────

    def get_intersecting(
        self, geometry: JsonValue, against: Optional[str] = None
    ) -> ModelQueryDescriptor:
        """Keep documents whose geometry intersects ``geometry``."""
        op = ModelGeoOp(
            op=EnumGeoOperator.GET_INTERSECTING, args=(geometry,), against=against
        )
        return self.model_copy(update={"geo_op": op})

    def get_nearest(
        self,
        point: JsonValue,
        against: Optional[str] = None,
        max_results: int = 100,
        max_dist: float = 100000,
        unit: str = "m",
    ) -> ModelQueryDescriptor:
        """Order documents by distance from ``point``."""
        op = ModelGeoOp(
            op=EnumGeoOperator.GET_NEAREST,
            args=(point,),
            kwargs={"max_results": max_results, "max_dist": max_dist, "unit": unit},
            against=against,
        )
        return self.model_copy(update={"geo_op": op})

    # ── Window ───────────────────────────────────────────────────────────

    def start(self, x: int) -> ModelQueryDescriptor:
        return self.model_copy(update={"window_start": x})

    def end(self, x: int) -> ModelQueryDescriptor:
        return self.model_copy(update={"window_end": x})

    def limit(self, x: int) -> ModelQueryDescriptor:
        return self.model_copy(update={"window_limit": x})

    # ── Aggregation ──────────────────────────────────────────────────────

    def _aggregate(
        self,
        op: EnumAggregationOperator,
        args: Optional[tuple[JsonValue, ...]] = None,
        kwargs: Optional[dict[str, JsonValue]] = None,
    ) -> ModelQueryDescriptor:
        aggregation = ModelAggregation(op=op, args=args, kwargs=kwargs)
        return self.model_copy(update={"aggregation": aggregation})

    def count(self) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.COUNT)

    def count_value(self, value: JsonValue) -> ModelQueryDescriptor:
        """Count documents equal to ``value``."""
        return self._aggregate(EnumAggregationOperator.COUNT, args=(value,))

    def sum(self, field: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.SUM, args=(field,))

    def avg(self, field: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.AVG, args=(field,))

    def min(self, field: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.MIN, args=(field,))

    def max(self, field: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.MAX, args=(field,))

    def min_in_index(self, index: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.MIN, kwargs={"index": index})

    def max_in_index(self, index: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.MAX, kwargs={"index": index})

    def pluck(self, *fields: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.PLUCK, args=tuple(fields))

    def without(self, *fields: str) -> ModelQueryDescriptor:
        return self._aggregate(EnumAggregationOperator.WITHOUT, args=tuple(fields))

    def distinct(self, index: Optional[str] = None) -> ModelQueryDescriptor:
        if index:
            return self._aggregate(
                EnumAggregationOperator.DISTINCT, kwargs={"index": index}
            )
        return self._aggregate(EnumAggregationOperator.DISTINCT)

    # ── Rendering ────────────────────────────────────────────────────────

    def render_plain(self) -> dict[str, JsonValue]:
        """Render the full nested structure, unserialized.

        Only slots that have been set appear in the result.
        """
        rendered: dict[str, JsonValue] = {}
        if self.keys is not None:
            rendered["keys"] = list(self.keys)
        if self.key_index:
            rendered["index"] = self.key_index
        if self.filters:
            rendered["flt"] = [f.render() for f in self.filters]
        if self.geo_op is not None:
            rendered["geo"] = self.geo_op.render()
        if self.window_start is not None:
            rendered["start"] = self.window_start
        if self.window_end is not None:
            rendered["end"] = self.window_end
        if self.window_limit is not None:
            rendered["limit"] = self.window_limit
        if self.aggregation is not None:
            rendered["agg"] = self.aggregation.render()
        return rendered

    def render_wire(self) -> dict[str, JsonValue]:
        """Render for transmission.

        Composite slots (``flt``, ``agg``, ``geo``, ``keys``) become JSON text;
        scalar slots (``index``, ``start``, ``limit``, ``end``) pass through.
        """
        plain = self.render_plain()
        rendered: dict[str, JsonValue] = {}
        for name in _COMPOSITE_FIELDS:
            if name in plain:
                rendered[name] = _to_json_text(plain[name])
        for name in _SCALAR_FIELDS:
            if name in plain:
                rendered[name] = plain[name]
        return rendered

    # ── Reconstruction ───────────────────────────────────────────────────

    @classmethod
    def from_plain(cls, data: Mapping[str, JsonValue]) -> ModelQueryDescriptor:
        """Rebuild a descriptor from the output of :meth:`render_plain`."""
        keys = data.get("keys")
        flt = data.get("flt") or []
        geo = data.get("geo")
        agg = data.get("agg")
        index = data.get("index")
        return cls(
            keys=tuple(keys) if isinstance(keys, list) else None,
            key_index=str(index) if index else None,
            filters=tuple(ModelFilterOp.from_plain(f) for f in flt),
            geo_op=ModelGeoOp.from_plain(geo) if isinstance(geo, dict) else None,
            window_start=data.get("start"),
            window_end=data.get("end"),
            window_limit=data.get("limit"),
            aggregation=(
                ModelAggregation.from_plain(agg) if isinstance(agg, dict) else None
            ),
        )

    @classmethod
    def from_json(cls, text: str) -> ModelQueryDescriptor:
        """Rebuild a descriptor from a JSON-encoded plain render."""
        return cls.from_plain(json.loads(text))


__all__ = ["ModelQueryDescriptor"]
