# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-call request overrides.

A partial update of a request context that applies to a single logical call
only. The overridable fields are a fixed subset of the context's fields; none
of them takes part in URL assembly.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from sondra_client.models.model_query_descriptor import ModelQueryDescriptor
from sondra_client.models.model_robust_config import ModelRobustConfig
from sondra_client.utils.util_frozen_mapping import (
    FrozenJsonMapping,
    FrozenOptionsMapping,
    FrozenStrMapping,
)


class ModelRequestOverrides(BaseModel):
    """Fields to replace on a request context for one call.

    ``None`` means "keep the context's value". Set fields replace the
    context's value wholesale; mappings are not merged.

    Example:
        >>> overrides = ModelRequestOverrides(
        ...     request_method="PATCH", body={"status": "closed"}
        ... )
        >>> await ticket.execute(overrides)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    request_method: Optional[str] = None
    body: Optional[FrozenJsonMapping] = None
    headers: Optional[FrozenStrMapping] = None
    query_descriptor: Optional[ModelQueryDescriptor] = None
    additional_request_options: Optional[FrozenOptionsMapping] = None
    robust: Optional[ModelRobustConfig] = None

    def as_update(self) -> dict[str, object]:
        """Return the set fields as a ``model_copy`` update mapping."""
        update: dict[str, object] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None:
                update[name] = value
        if "request_method" in update:
            update["request_method"] = str(update["request_method"]).upper()
        return update


__all__ = ["ModelRequestOverrides"]
