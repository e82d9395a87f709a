# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deferred request state model.

Tracks one logical resilient call across its physical attempts. The
``request_id`` is assigned once and carried unchanged through every retry so
observers can correlate attempts.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sondra_client.enums import EnumCallState, EnumFailurePolicy


class ModelDeferredRequest(BaseModel):
    """Immutable snapshot of a logical call's progress.

    Attributes:
        request_id: Logical-call identifier shared by all attempts
        attempt: Completed transient transport failures so far. Probe
            failures and application errors never count.
        policy: Failure policy applied to the next transport failure
        state: Current state of the call
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    request_id: int
    attempt: int = Field(default=0, ge=0)
    policy: EnumFailurePolicy = EnumFailurePolicy.DEFER
    state: EnumCallState = EnumCallState.PROBING

    def transition(self, state: EnumCallState) -> ModelDeferredRequest:
        return self.model_copy(update={"state": state})

    def next_attempt(self, max_tries: int) -> ModelDeferredRequest:
        """Count one transport failure.

        Once ``attempt + 1`` reaches ``max_tries`` the following attempt runs
        under ``fail``, so one attempt beyond ``max_tries`` is still made.
        """
        attempt = self.attempt + 1
        policy = EnumFailurePolicy.FAIL if attempt >= max_tries else self.policy
        return self.model_copy(update={"attempt": attempt, "policy": policy})


__all__ = ["ModelDeferredRequest"]
