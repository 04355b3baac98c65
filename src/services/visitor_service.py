# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Unique visitor detection for public page views."""

import hashlib
import threading
import time
from collections.abc import Callable

from cachetools import TTLCache

# Path prefixes that never count as a page view
UNTRACKED_PREFIXES = ("/api/", "/assets/", "/admin/")


def should_track(path: str) -> bool:
    """Check whether a request path counts as a page view."""
    if path.startswith(UNTRACKED_PREFIXES):
        return False
    # Static files (favicon.ico, app.js, ...)
    return "." not in path


def client_ip(raw: str | None) -> str:
    """Return the originating address from a possibly forwarded value."""
    if not raw:
        return "Unknown"
    return raw.split(",")[0].strip() or "Unknown"


def derive_session_id(ip_address: str | None, user_agent: str | None) -> str:
    """Derive a stable visitor session id from address and user agent."""
    seed = f"{client_ip(ip_address)}_{user_agent or ''}"
    return hashlib.md5(seed.encode(), usedforsecurity=False).hexdigest()


class VisitorSessionCache:
    """Bounded set of recently seen visitor sessions.

    Entries expire after ``ttl_seconds``; once ``max_size`` entries are held
    the least recently used one is evicted.
    """

    def __init__(
        self,
        max_size: int = 10_000,
        ttl_seconds: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: TTLCache = TTLCache(
            maxsize=max_size, ttl=ttl_seconds, timer=timer
        )
        self._lock = threading.Lock()

    def register(self, session_id: str) -> bool:
        """Record a visit. Returns True if the session was not seen recently."""
        with self._lock:
            if session_id in self._sessions:
                return False
            self._sessions[session_id] = True
            return True

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            self._sessions.expire()
            return len(self._sessions)

    def clear(self) -> None:
        """Forget every session."""
        with self._lock:
            self._sessions.clear()
