import logging
import threading
from time import monotonic
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SnapshotCache(Generic[T]):
    """
    Holds one snapshot plus the time it was produced.

      - get_or_refresh(producer) returns the snapshot while it is younger than
        ``ttl`` seconds, otherwise calls ``producer`` and stores the result
      - the check-refresh-store sequence runs under one lock, so concurrent
        callers past the TTL share a single refresh instead of each fetching
      - if a refresh raises and an older snapshot exists, the old one is served
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = monotonic):
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._fetched_at: Optional[float] = None

    def _is_fresh(self, now: float) -> bool:
        return self._fetched_at is not None and (now - self._fetched_at) < self._ttl

    def get_or_refresh(self, producer: Callable[[], T]) -> T:
        with self._lock:
            now = self._clock()
            if self._value is not None and self._is_fresh(now):
                return self._value
            try:
                value = producer()
            except Exception:
                if self._value is None:
                    raise
                logger.exception("snapshot refresh failed; serving previous snapshot")
                return self._value
            self._value = value
            self._fetched_at = self._clock()
            return value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._fetched_at = None
