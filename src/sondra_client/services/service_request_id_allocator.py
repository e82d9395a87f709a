# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request id allocator.

Hands out monotonically increasing logical-call identifiers. One allocator
is shared by every resilient call of an executor, so concurrent calls
always receive distinct ids.
"""

from __future__ import annotations

import threading


class ServiceRequestIdAllocator:
    """Thread-safe monotonic id counter.

    Example:
        >>> allocator = ServiceRequestIdAllocator()
        >>> allocator.next_id(), allocator.next_id()
        (1, 2)
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next id and advance the counter."""
        with self._lock:
            request_id = self._next
            self._next += 1
        return request_id

    def peek(self) -> int:
        """Return the id the next call to :meth:`next_id` will hand out."""
        with self._lock:
            return self._next


__all__ = ["ServiceRequestIdAllocator"]
