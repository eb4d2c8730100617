"""Per-client request quotas.

Uses the `limits` library (the engine underneath slowapi) with in-memory
storage and the fixed-window strategy: every window refills completely at
its boundary instead of leaking points back gradually.

State lives for the life of the process. Restarting the service resets
every client's budget; running several instances gives each instance its
own independent counters.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Iterable, List, Optional

from limits import RateLimitItem, parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter

from chat_relay.config import RATE_LIMITS
from chat_relay.errors import QuotaExceeded

LOG = logging.getLogger(__name__)


class QuotaTracker:
    """Conjunction of fixed-window quotas keyed by client identifier.

    ``check()`` consumes one point from each window in the configured order
    (minute, hour, day by default) and stops at the first exhausted window,
    so later windows are never charged for a rejected request.

    The whole check runs under one lock, so two concurrent requests for the
    same client can never both take (or both be refused) the last point.
    """

    def __init__(self, limits: Iterable[str] = RATE_LIMITS, storage: Optional[Storage] = None):
        self.windows: List[RateLimitItem] = [parse(item) for item in limits]
        if not self.windows:
            raise ValueError("at least one quota window is required")
        self._storage = storage or MemoryStorage()
        self._limiter = FixedWindowRateLimiter(self._storage)
        self._lock = threading.Lock()

    def check(self, client_id: str) -> None:
        """Consume one point per window or raise ``QuotaExceeded``."""
        with self._lock:
            for window in self.windows:
                if not self._limiter.hit(window, client_id):
                    stats = self._limiter.get_window_stats(window, client_id)
                    retry_after = stats.reset_time - time.time()
                    LOG.warning("Quota %s exhausted for client %s (reset in %.0fs)", window, client_id, retry_after)
                    raise QuotaExceeded(retry_after=retry_after)

    def remaining(self, client_id: str) -> List[int]:
        """Points left in each window, in check order."""
        return [self._limiter.get_window_stats(w, client_id).remaining for w in self.windows]

    def reset(self) -> None:
        self._storage.reset()


__all__ = ["QuotaTracker"]
