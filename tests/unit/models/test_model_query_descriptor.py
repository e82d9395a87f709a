# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelQueryDescriptor.

Validates:
- Builder methods return new descriptors and leave the original untouched
- Filter chain order is preserved in the plain render
- Aggregation and geospatial slots are last-write-wins
- Wire render serializes composite slots and passes scalars through
- Plain render -> rebuild -> plain render is stable
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from sondra_client.enums import EnumAggregationOperator, EnumFilterOperator
from sondra_client.models import ModelQueryDescriptor


class TestImmutability:
    def test_builders_return_new_descriptor(self) -> None:
        base = ModelQueryDescriptor()
        derived = base.gt("age", 21)

        assert derived is not base
        assert base.filters == ()
        assert len(derived.filters) == 1

    def test_fields_cannot_be_assigned(self) -> None:
        q = ModelQueryDescriptor()

        with pytest.raises(ValidationError):
            q.window_limit = 5  # type: ignore[misc]

    def test_operation_kwargs_are_read_only(self) -> None:
        q = ModelQueryDescriptor().get_nearest({"type": "Point"}).max_in_index("ts")

        assert q.geo_op is not None and q.geo_op.kwargs is not None
        assert q.aggregation is not None and q.aggregation.kwargs is not None
        with pytest.raises(TypeError):
            q.geo_op.kwargs["max_results"] = 1  # type: ignore[index]
        with pytest.raises(TypeError):
            q.aggregation.kwargs["index"] = "other"  # type: ignore[index]
        assert q.render_plain()["agg"] == {"op": "max", "kwargs": {"index": "ts"}}

    def test_empty_descriptor_renders_empty(self) -> None:
        assert ModelQueryDescriptor().render_plain() == {}
        assert ModelQueryDescriptor().render_wire() == {}


class TestFilterChain:
    def test_filters_render_in_application_order(self) -> None:
        q = (
            ModelQueryDescriptor()
            .gt("age", 21)
            .eq("status", "active")
            .lte("score", 10, default=True)
            .has_fields(["name", "email"])
        )

        flt = q.render_plain()["flt"]

        assert [f["op"] for f in flt] == [">", "==", "<=", "has_fields"]
        assert flt[0] == {"op": ">", "lhs": "age", "rhs": 21, "default": False}
        assert flt[2]["default"] is True
        assert flt[3] == {"op": "has_fields", "fields": ["name", "email"]}

    @pytest.mark.parametrize(
        ("method", "operator"),
        [
            ("lt", EnumFilterOperator.LT),
            ("gt", EnumFilterOperator.GT),
            ("lte", EnumFilterOperator.LTE),
            ("gte", EnumFilterOperator.GTE),
            ("eq", EnumFilterOperator.EQ),
            ("match", EnumFilterOperator.MATCH),
            ("contains", EnumFilterOperator.CONTAINS),
        ],
    )
    def test_comparison_operators(
        self, method: str, operator: EnumFilterOperator
    ) -> None:
        q = getattr(ModelQueryDescriptor(), method)("field", "value")

        assert q.filters[0].op is operator
        assert q.render_plain()["flt"][0]["op"] == operator.value

    def test_filters_stack_across_saved_descriptors(self) -> None:
        adults = ModelQueryDescriptor().gte("age", 18)
        active_adults = adults.eq("active", True)
        named_adults = adults.has_fields(["name"])

        assert len(adults.filters) == 1
        assert len(active_adults.filters) == 2
        assert named_adults.filters[1].op is EnumFilterOperator.HAS_FIELDS


class TestSlots:
    def test_aggregation_last_write_wins(self) -> None:
        q = ModelQueryDescriptor().count().sum("price").avg("price")

        assert q.aggregation is not None
        assert q.aggregation.op is EnumAggregationOperator.AVG
        assert q.render_plain()["agg"] == {"op": "avg", "args": ["price"]}

    def test_count_without_args(self) -> None:
        assert ModelQueryDescriptor().count().render_plain()["agg"] == {"op": "count"}

    def test_index_aggregations_use_kwargs(self) -> None:
        q = ModelQueryDescriptor().max_in_index("created")

        assert q.render_plain()["agg"] == {"op": "max", "kwargs": {"index": "created"}}

    def test_pluck_and_distinct(self) -> None:
        assert ModelQueryDescriptor().pluck("a", "b").render_plain()["agg"] == {
            "op": "pluck",
            "args": ["a", "b"],
        }
        assert ModelQueryDescriptor().distinct().render_plain()["agg"] == {
            "op": "distinct"
        }
        assert ModelQueryDescriptor().distinct("tag").render_plain()["agg"] == {
            "op": "distinct",
            "kwargs": {"index": "tag"},
        }

    def test_geo_last_write_wins(self) -> None:
        point = {"type": "Point", "coordinates": [0, 0]}
        q = (
            ModelQueryDescriptor()
            .get_intersecting({"type": "Polygon"}, against="area")
            .get_nearest(point, against="location")
        )

        assert q.render_plain()["geo"] == {
            "op": "get_nearest",
            "args": [point],
            "kwargs": {"max_results": 100, "max_dist": 100000, "unit": "m"},
            "against": "location",
        }

    def test_keys_and_window(self) -> None:
        q = ModelQueryDescriptor().for_keys(["a", "b"], index="slug").start(10).limit(5)

        assert q.render_plain() == {
            "keys": ["a", "b"],
            "index": "slug",
            "start": 10,
            "limit": 5,
        }


class TestWireRender:
    def test_composite_slots_become_json_text(self) -> None:
        q = ModelQueryDescriptor().for_keys([1, 2]).gt("age", 21).count()

        wire = q.render_wire()

        assert isinstance(wire["flt"], str)
        assert json.loads(wire["flt"]) == q.render_plain()["flt"]
        assert json.loads(wire["keys"]) == [1, 2]
        assert json.loads(wire["agg"]) == {"op": "count"}

    def test_scalar_slots_pass_through(self) -> None:
        q = ModelQueryDescriptor().for_keys(["x"], index="i").start(0).end(9).limit(3)

        wire = q.render_wire()

        assert wire["index"] == "i"
        assert wire["start"] == 0
        assert wire["end"] == 9
        assert wire["limit"] == 3


class TestReconstruction:
    def test_plain_render_round_trip_is_stable(self) -> None:
        q = (
            ModelQueryDescriptor()
            .for_keys(["a", 2], index="by_slug")
            .lt("price", 100)
            .match("name", "^A", default=True)
            .has_fields(["name"])
            .get_nearest({"type": "Point", "coordinates": [1, 2]}, max_results=5)
            .start(1)
            .end(20)
            .limit(10)
            .pluck("name", "price")
        )
        plain = q.render_plain()

        rebuilt = ModelQueryDescriptor.from_plain(plain)

        assert rebuilt.render_plain() == plain

    def test_from_json(self) -> None:
        q = ModelQueryDescriptor().gte("age", 18).min("age")

        rebuilt = ModelQueryDescriptor.from_json(json.dumps(q.render_plain()))

        assert rebuilt.render_plain() == q.render_plain()
