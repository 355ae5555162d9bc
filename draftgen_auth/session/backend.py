"""Server-side session stores."""

from __future__ import annotations

import time
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionBackend(Protocol):
    """Where session data lives between requests, keyed by session ID."""

    async def load(self, session_id: str) -> dict[str, Any] | None:
        """Session data, or None if unknown or expired."""
        ...

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        ...

    async def delete(self, session_id: str) -> None:
        """Forget a session. Unknown IDs are not an error."""
        ...


class InMemoryBackend:
    """Process-local store for development and tests.

    Sessions do not survive a restart and are not shared between workers.
    """

    def __init__(self, max_age: int = 7 * 24 * 3600) -> None:
        self._store: dict[str, tuple[dict[str, Any], float]] = {}
        self._max_age = max_age

    def __len__(self) -> int:
        return len(self._store)

    async def load(self, session_id: str) -> dict[str, Any] | None:
        entry = self._store.get(session_id)
        if entry is None:
            return None
        data, created = entry
        if time.time() - created > self._max_age:
            del self._store[session_id]
            return None
        return dict(data)

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        existing = self._store.get(session_id)
        created = existing[1] if existing else time.time()
        self._store[session_id] = (dict(data), created)

    async def delete(self, session_id: str) -> None:
        self._store.pop(session_id, None)
