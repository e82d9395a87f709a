# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the sondra_client package."""

from sondra_client.enums.enum_aggregation_operator import EnumAggregationOperator
from sondra_client.enums.enum_call_state import EnumCallState
from sondra_client.enums.enum_connectivity_state import EnumConnectivityState
from sondra_client.enums.enum_failure_policy import EnumFailurePolicy
from sondra_client.enums.enum_filter_operator import EnumFilterOperator
from sondra_client.enums.enum_geo_operator import EnumGeoOperator
from sondra_client.enums.enum_response_format import EnumResponseFormat

__all__: list[str] = [
    "EnumAggregationOperator",
    "EnumCallState",
    "EnumConnectivityState",
    "EnumFailurePolicy",
    "EnumFilterOperator",
    "EnumGeoOperator",
    "EnumResponseFormat",
]
