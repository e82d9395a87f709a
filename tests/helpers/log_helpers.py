# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Log filtering helpers for test assertions.

Example usage:
    >>> from tests.helpers.log_helpers import filter_module_warnings
    >>>
    >>> warnings = filter_module_warnings(
    ...     caplog.records,
    ...     module_name="sondra_client.services.service_request_executor",
    ... )
    >>> assert len(warnings) == 2
"""

import logging
from collections.abc import Sequence


def filter_module_warnings(
    records: Sequence[logging.LogRecord],
    module_name: str,
    min_level: int = logging.WARNING,
) -> list[logging.LogRecord]:
    """Filter log records to those at or above ``min_level`` from a module.

    Args:
        records: Sequence of log records (typically ``caplog.records``).
        module_name: Logger name fragment to match.
        min_level: Minimum log level to include. Defaults to logging.WARNING.

    Returns:
        List of log records matching the filter criteria.
    """
    return [
        record
        for record in records
        if record.levelno >= min_level and module_name in record.name
    ]


__all__ = ["filter_module_warnings"]
