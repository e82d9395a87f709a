# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resilience tuning for resilient calls."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_TRIES: int = 10
DEFAULT_REFETCH_DELAY_SECONDS: float = 1.5
DEFAULT_PING_PATH: str = "/ping"


class ModelRobustConfig(BaseModel):
    """Retry bounds and liveness probe location for resilient calls.

    Attributes:
        max_tries: Transport failures tolerated under the ``defer`` policy
            before the next attempt is made under ``fail``
        refetch_delay_seconds: Fixed delay between attempts
        ping_path: Path of the liveness probe, appended to ``host:port``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_tries: int = Field(default=DEFAULT_MAX_TRIES, ge=0)
    refetch_delay_seconds: float = Field(default=DEFAULT_REFETCH_DELAY_SECONDS, ge=0.0)
    ping_path: str = Field(default=DEFAULT_PING_PATH)


__all__ = [
    "DEFAULT_MAX_TRIES",
    "DEFAULT_PING_PATH",
    "DEFAULT_REFETCH_DELAY_SECONDS",
    "ModelRobustConfig",
]
