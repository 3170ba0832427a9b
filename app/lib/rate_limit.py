# app/lib/rate_limit.py
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fastapi import Depends, Request

from app.config import config
from app.logger import get_logger
from app.lib.errors import RateLimitExceededError

log = get_logger(__name__)


@dataclass
class RateLimitEntry:
    count: int
    window_start: float


class FixedWindowRateLimiter:
    """
    At most `max_requests` per `window_seconds` for each key.
    In-memory only: not shared across processes, reset on restart.
    """

    def __init__(self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            # full sweep at most once per window
            if now - self._last_sweep >= self.window_seconds:
                self._evict_expired(now)
                self._last_sweep = now
            entry = self._entries.get(key)
            if entry is None or now - entry.window_start >= self.window_seconds:
                self._entries[key] = RateLimitEntry(count=1, window_start=now)
                return True
            if entry.count >= self.max_requests:
                return False
            entry.count += 1
            return True

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if now - e.window_start >= self.window_seconds]
        for k in expired:
            del self._entries[k]

    def __len__(self) -> int:
        return len(self._entries)


_limiter: Optional[FixedWindowRateLimiter] = None


def get_rate_limiter() -> FixedWindowRateLimiter:
    global _limiter
    if _limiter is None:
        _limiter = FixedWindowRateLimiter(
            max_requests=config.rate_limit_max_requests,
            window_seconds=config.rate_limit_window_seconds,
        )
    return _limiter


def client_key(request: Request) -> str:
    """
    Socket peer address. Forwarded headers are honored only with
    TRUST_PROXY_HEADERS on; otherwise any client could pick its own key.
    """
    if config.trust_proxy_headers:
        fwd = request.headers.get("x-forwarded-for")
        if fwd:
            return fwd.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
    return request.client.host if request.client else "unknown"


async def enforce_rate_limit(
    request: Request,
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> None:
    key = client_key(request)
    if not limiter.allow(key):
        log.info(f"rate limit hit for {key}")
        raise RateLimitExceededError(
            "Rate limit reached",
            message=f"Maximum {limiter.max_requests} requests per "
                    f"{int(limiter.window_seconds // 60)} minutes. Try again later.",
        )
