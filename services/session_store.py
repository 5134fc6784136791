from __future__ import annotations

import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionData:
    user_id: str
    name: str | None
    created_at: float


class SessionStore:
    """
    Server-side login sessions keyed by an opaque token.

    A session lives for `ttl_seconds` from creation regardless of activity.
    Expired entries are dropped when read and swept whenever a new session
    is created.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str, name: str | None) -> str:
        token = secrets.token_urlsafe(32)
        now = self._clock()
        with self._lock:
            self._sweep(now)
            self._sessions[token] = SessionData(user_id=user_id, name=name, created_at=now)
        return token

    def get(self, token: str | None) -> SessionData | None:
        if not token:
            return None
        now = self._clock()
        with self._lock:
            data = self._sessions.get(token)
            if data is None:
                return None
            if self._expired(data, now):
                del self._sessions[token]
                return None
            return data

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    def _expired(self, data: SessionData, now: float) -> bool:
        return now - data.created_at >= self.ttl_seconds

    def _sweep(self, now: float) -> None:
        for token in [t for t, d in self._sessions.items() if self._expired(d, now)]:
            del self._sessions[token]
