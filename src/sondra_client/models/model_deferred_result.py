# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of a successful resilient call."""

from pydantic import BaseModel, ConfigDict, JsonValue


class ModelDeferredResult(BaseModel):
    """Parsed response body together with the logical call's request id."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    request_id: int
    data: JsonValue = None


__all__ = ["ModelDeferredResult"]
