"""Session invalidation against an injected auth capability."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..errors import SessionInvalidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionHandle:
    """Credentials identifying the session to terminate."""

    access_token: str
    refresh_token: str | None = None

    @classmethod
    def from_session(cls, session: dict) -> SessionHandle | None:
        """Build a handle from server-side session data, if it holds tokens."""
        tokens = session.get("tokens") or {}
        access_token = tokens.get("access_token")
        if not access_token:
            return None
        return cls(access_token=access_token, refresh_token=tokens.get("refresh_token"))


@dataclass(frozen=True)
class InvalidationResult:
    ok: bool
    error: SessionInvalidationError | None = None

    @classmethod
    def success(cls) -> InvalidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: SessionInvalidationError) -> InvalidationResult:
        return cls(ok=False, error=error)


@runtime_checkable
class AuthCapability(Protocol):
    """Protocol for the provider that owns session state."""

    async def invalidate_session(self, handle: SessionHandle) -> InvalidationResult:
        """Terminate the session. Report failures in the result, don't raise."""
        ...


async def invalidate_session(
    auth: AuthCapability, handle: SessionHandle | None
) -> InvalidationResult:
    """Ask ``auth`` to terminate the session behind ``handle``.

    Never raises. A missing handle means there is nothing to revoke and counts
    as success; anything the capability raises is folded into a failure result.
    """
    if handle is None:
        return InvalidationResult.success()

    try:
        return await auth.invalidate_session(handle)
    except SessionInvalidationError as e:
        return InvalidationResult.failure(e)
    except Exception as e:
        logger.debug("Auth capability raised during invalidation", exc_info=True)
        return InvalidationResult.failure(
            SessionInvalidationError(str(e) or type(e).__name__, code="unexpected_error")
        )
