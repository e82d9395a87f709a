# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Immutable models for the sondra_client package.

Exports:
    ModelQueryDescriptor: Immutable query specification
    ModelFilterOp, ModelGeoOp, ModelAggregation: Query slots
    ModelRequestContext: Immutable request descriptor
    ModelRequestOverrides: Per-call partial update of a request context
    ModelRobustConfig: Resilience tuning
    ModelDeferredRequest: Progress of one logical resilient call
    ModelDeferredResult: Successful resilient call outcome
    ModelClientConfig: Connection and resilience configuration
"""

from sondra_client.models.model_aggregation import ModelAggregation
from sondra_client.models.model_client_config import ModelClientConfig
from sondra_client.models.model_deferred_request import ModelDeferredRequest
from sondra_client.models.model_deferred_result import ModelDeferredResult
from sondra_client.models.model_filter_op import ModelFilterOp
from sondra_client.models.model_geo_op import ModelGeoOp
from sondra_client.models.model_query_descriptor import ModelQueryDescriptor
from sondra_client.models.model_request_context import ModelRequestContext
from sondra_client.models.model_request_overrides import ModelRequestOverrides
from sondra_client.models.model_robust_config import ModelRobustConfig

__all__: list[str] = [
    "ModelAggregation",
    "ModelClientConfig",
    "ModelDeferredRequest",
    "ModelDeferredResult",
    "ModelFilterOp",
    "ModelGeoOp",
    "ModelQueryDescriptor",
    "ModelRequestContext",
    "ModelRequestOverrides",
    "ModelRobustConfig",
]
