# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Configuration Model.

Connection target, transport timeout and resilience tuning, loadable from
environment variables or a YAML file.

Environment Variables:
    SONDRA_PROTOCOL: URL scheme (default: https)
    SONDRA_HOST: Origin host (default: localhost)
    SONDRA_PORT: Origin port (default: 443, range: 1-65535)
    SONDRA_BASE_PATH: Slash-separated base path (default: api)
    SONDRA_TIMEOUT: Transport timeout in seconds (default: 30.0, range: 0.1-3600.0)
    SONDRA_MAX_TRIES: Resilient-call retry bound (default: 10, range: 0-1000)
    SONDRA_REFETCH_DELAY: Delay between attempts in seconds (default: 1.5, range: 0.0-3600.0)
    SONDRA_PING_PATH: Liveness probe path (default: /ping)

Example YAML::

    protocol: http
    host: localhost
    port: 5000
    base_path: [api]
    timeout_seconds: 10
    robust:
      max_tries: 5
      refetch_delay_seconds: 0.5
      ping_path: /ping
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sondra_client.errors import ConfigurationError, ModelClientErrorContext
from sondra_client.models.model_robust_config import (
    DEFAULT_MAX_TRIES,
    DEFAULT_PING_PATH,
    DEFAULT_REFETCH_DELAY_SECONDS,
    ModelRobustConfig,
)
from sondra_client.utils.util_env_parsing import parse_env_float, parse_env_int

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 30.0
_TIMEOUT_MIN: float = 0.1
_TIMEOUT_MAX: float = 3600.0
_PORT_MIN: int = 1
_PORT_MAX: int = 65535
_MAX_TRIES_MIN: int = 0
_MAX_TRIES_MAX: int = 1000
_REFETCH_DELAY_MIN: float = 0.0
_REFETCH_DELAY_MAX: float = 3600.0


class ModelClientConfig(BaseModel):
    """Client configuration.

    Attributes:
        protocol: URL scheme
        host: Origin host name
        port: Origin port
        base_path: Path segments preceding the app
        timeout_seconds: Transport timeout applied to every request
        robust: Resilience tuning for resilient calls
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    protocol: str = "https"
    host: str = "localhost"
    port: int = Field(default=443, ge=_PORT_MIN, le=_PORT_MAX)
    base_path: tuple[str, ...] = ("api",)
    timeout_seconds: float = Field(
        default=_DEFAULT_TIMEOUT_SECONDS, ge=_TIMEOUT_MIN, le=_TIMEOUT_MAX
    )
    robust: ModelRobustConfig = Field(default_factory=ModelRobustConfig)

    @classmethod
    def from_env(cls) -> ModelClientConfig:
        """Load configuration from ``SONDRA_*`` environment variables.

        Raises:
            ConfigurationError: If a numeric variable is not numeric.
        """
        base_path_raw = os.environ.get("SONDRA_BASE_PATH", "api")
        base_path = tuple(segment for segment in base_path_raw.split("/") if segment)

        robust = ModelRobustConfig(
            max_tries=parse_env_int(
                "SONDRA_MAX_TRIES",
                DEFAULT_MAX_TRIES,
                min_value=_MAX_TRIES_MIN,
                max_value=_MAX_TRIES_MAX,
            ),
            refetch_delay_seconds=parse_env_float(
                "SONDRA_REFETCH_DELAY",
                DEFAULT_REFETCH_DELAY_SECONDS,
                min_value=_REFETCH_DELAY_MIN,
                max_value=_REFETCH_DELAY_MAX,
            ),
            ping_path=os.environ.get("SONDRA_PING_PATH", DEFAULT_PING_PATH),
        )
        config = cls(
            protocol=os.environ.get("SONDRA_PROTOCOL", "https"),
            host=os.environ.get("SONDRA_HOST", "localhost"),
            port=parse_env_int(
                "SONDRA_PORT", 443, min_value=_PORT_MIN, max_value=_PORT_MAX
            ),
            base_path=base_path,
            timeout_seconds=parse_env_float(
                "SONDRA_TIMEOUT",
                _DEFAULT_TIMEOUT_SECONDS,
                min_value=_TIMEOUT_MIN,
                max_value=_TIMEOUT_MAX,
            ),
            robust=robust,
        )
        logger.debug(
            "Client configuration loaded from environment",
            extra={"host": config.host, "port": config.port},
        )
        return config

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelClientConfig:
        """Load configuration from a YAML mapping.

        Raises:
            ConfigurationError: If the file cannot be read, is not a mapping,
                or does not validate.
        """
        config_path = Path(path)
        ctx = ModelClientErrorContext(
            operation="load_config", target_name=str(config_path)
        )
        try:
            with config_path.open(encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {config_path}", context=ctx
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {config_path}", context=ctx
            ) from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping", context=ctx
            )
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e.error_count()} error(s)",
                context=ctx,
            ) from e


__all__ = ["ModelClientConfig"]
