"""Per-client request rate limiting.

Each client address gets a token bucket holding `capacity` tokens that
refills greedily at capacity / window_seconds tokens per second.  A request
consumes one token; an empty bucket answers 429 without reaching the route.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded! Please try again later."


@dataclass
class _Bucket:
    tokens: float
    updated_at: float


class RateLimiter:
    """Thread-safe map of client address → token bucket."""

    def __init__(
        self,
        capacity: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be positive, got {window_seconds}")
        self._capacity = capacity
        self._window_seconds = window_seconds
        self._refill_rate = capacity / window_seconds
        self._clock = clock
        self._buckets: dict[str, _Bucket] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def try_acquire(self, client: str) -> bool:
        """Consume one token for `client`; False when its bucket is empty."""
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self._window_seconds:
                self._evict_full(now)
            bucket = self._buckets.get(client)
            if bucket is None:
                logger.info("Creating rate-limiting bucket for %s", client)
                bucket = self._buckets[client] = _Bucket(float(self._capacity), now)
            else:
                elapsed = max(now - bucket.updated_at, 0.0)
                bucket.tokens = min(self._capacity, bucket.tokens + elapsed * self._refill_rate)
                bucket.updated_at = now
            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return True
            return False

    def available(self, client: str) -> float:
        with self._lock:
            bucket = self._buckets.get(client)
            return float(self._capacity) if bucket is None else bucket.tokens

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _evict_full(self, now: float) -> None:
        # A bucket refilled to capacity is indistinguishable from a new one.
        idle = [
            client
            for client, bucket in self._buckets.items()
            if bucket.tokens + (now - bucket.updated_at) * self._refill_rate >= self._capacity
        ]
        for client in idle:
            del self._buckets[client]
        self._last_sweep = now
        if idle:
            logger.debug("Evicted %d idle rate-limiting buckets", len(idle))


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, limiter: RateLimiter) -> None:
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client = request.client.host if request.client else "unknown"
        if not self._limiter.try_acquire(client):
            logger.warning("Request from %s denied: rate limit exceeded", client)
            return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429)
        return await call_next(request)
