"""Per-client request rate limiting with a fixed window per client."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


class RateLimitExceeded(Exception):
    """Raised when a client has made too many requests within the window."""

    def __init__(self, client_ip: str | None = None) -> None:
        self.client_ip = client_ip
        super().__init__("rate limit exceeded")


@dataclass
class RateLimitEntry:
    """Request bookkeeping for one client."""

    last_request: float
    count: int = 0


class RateLimiter:
    """Counts requests per client and refuses those beyond the limit."""

    def __init__(
        self,
        window: float = 60.0,
        max_requests: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window = window
        self.max_requests = max_requests
        self._clock = clock
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def check_rate_limit(self, client_ip: str) -> bool:
        """Record a request from ``client_ip``; return whether it is allowed."""
        now = self._clock()
        with self._lock:
            entry = self._entries.setdefault(client_ip, RateLimitEntry(now))
            if now - entry.last_request > self.window:
                entry.count = 1
                entry.last_request = now
                return True
            entry.count += 1
            return entry.count <= self.max_requests

    def clear_expired(self) -> None:
        """Forget clients whose window has run out."""
        now = self._clock()
        with self._lock:
            self._entries = {
                ip: entry
                for ip, entry in self._entries.items()
                if now - entry.last_request <= self.window
            }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, client_ip: object) -> bool:
        return client_ip in self._entries


def client_ip_from_headers(headers: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Return the ``X-Real-IP`` header value, or ``"unknown"`` if absent or unreadable."""
    items = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in items:
        if name.lower() != "x-real-ip":
            continue
        if isinstance(value, bytes):
            value = value.decode("latin-1")
        if all(ch == "\t" or " " <= ch <= "~" for ch in value):
            return value
        return "unknown"
    return "unknown"


def check_rate_limit(limiter: RateLimiter, client_ip: str) -> None:
    """Raise :class:`RateLimitExceeded` if ``client_ip`` is over its limit."""
    if not limiter.check_rate_limit(client_ip):
        raise RateLimitExceeded(client_ip)


def rate_limit(limiter: RateLimiter, headers: Any, call_next: Callable[[], T]) -> T:
    """Apply the limit to the request's client, then hand over to ``call_next``."""
    check_rate_limit(limiter, client_ip_from_headers(headers))
    return call_next()


def init_rate_limiter(clock: Callable[[], float] = time.monotonic) -> RateLimiter:
    """Build a limiter allowing 100 requests per 60 seconds."""
    return RateLimiter(60.0, 100, clock)