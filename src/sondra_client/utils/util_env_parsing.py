# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment variable parsing with range validation.

Non-numeric values are configuration errors. Values outside the accepted
range fall back to the default with a WARNING, so a typo in a tuning knob
never prevents the client from starting.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from sondra_client.errors import ConfigurationError, ModelClientErrorContext

logger = logging.getLogger(__name__)


def _read_raw(name: str) -> Optional[str]:
    return os.environ.get(name)


def _check_range(
    name: str,
    value: float,
    default: float,
    min_value: Optional[float],
    max_value: Optional[float],
) -> bool:
    if min_value is not None and value < min_value:
        logger.warning(
            "%s value %s is below minimum %s, using default %s",
            name,
            value,
            min_value,
            default,
        )
        return False
    if max_value is not None and value > max_value:
        logger.warning(
            "%s value %s is above maximum %s, using default %s",
            name,
            value,
            max_value,
            default,
        )
        return False
    return True


def parse_env_float(
    name: str,
    default: float,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    service_name: str = "sondra_client",
) -> float:
    """Parse a float environment variable.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        service_name: Target name reported in error context

    Returns:
        The parsed value, or ``default``.

    Raises:
        ConfigurationError: If the variable is set but not numeric.
    """
    raw = _read_raw(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        ctx = ModelClientErrorContext(operation="parse_env", target_name=service_name)
        raise ConfigurationError(
            f"Invalid value for {name}: expected numeric value, got {raw!r}",
            context=ctx,
            env_var=name,
        ) from e
    if not _check_range(name, value, default, min_value, max_value):
        return default
    return value


def parse_env_int(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
    service_name: str = "sondra_client",
) -> int:
    """Parse an integer environment variable.

    Same contract as :func:`parse_env_float`.
    """
    raw = _read_raw(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        ctx = ModelClientErrorContext(operation="parse_env", target_name=service_name)
        raise ConfigurationError(
            f"Invalid value for {name}: expected integer value, got {raw!r}",
            context=ctx,
            env_var=name,
        ) from e
    if not _check_range(name, value, default, min_value, max_value):
        return default
    return value


__all__ = ["parse_env_float", "parse_env_int"]
