"""Session termination: invalidate the session, then always redirect."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from fastapi.responses import RedirectResponse

from .. import ocsf
from ..config import Settings
from ..errors import SessionInvalidationError
from .invalidator import AuthCapability, InvalidationResult, SessionHandle, invalidate_session
from .origin import resolve_origin
from .responder import build_redirect

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["log", "ignore"]


@dataclass(frozen=True)
class RequestContext:
    """Everything the flow reads from the inbound request."""

    headers: Mapping[str, str]
    session_handle: SessionHandle | None = None
    user_email: str | None = None


class SessionTerminationService:
    """Sign the caller out and send them to ``destination``.

    The redirect is produced whether or not the provider managed to revoke
    the session. ``error_policy`` decides what happens to a failed
    invalidation: ``"log"`` records it, ``"ignore"`` drops it.
    """

    def __init__(
        self,
        auth: AuthCapability,
        destination: str,
        *,
        status_code: int = 307,
        error_policy: ErrorPolicy = "log",
        trusted_origins: Sequence[str] = (),
    ) -> None:
        self.auth = auth
        self.destination = destination
        self.status_code = status_code
        self.error_policy = error_policy
        self.trusted_origins = tuple(trusted_origins)

    @classmethod
    def from_settings(cls, auth: AuthCapability, s: Settings) -> SessionTerminationService:
        return cls(
            auth,
            s.logout_destination,
            status_code=s.logout_redirect_status,
            error_policy=s.invalidation_error_policy,
            trusted_origins=s.trusted_origins,
        )

    async def terminate(self, ctx: RequestContext) -> RedirectResponse:
        origin = resolve_origin(ctx.headers, self.trusted_origins)

        result = await invalidate_session(self.auth, ctx.session_handle)
        self._report(result, ctx)

        return build_redirect(origin, self.destination, self.status_code)

    def _report(self, result: InvalidationResult, ctx: RequestContext) -> None:
        if result.ok:
            ocsf.authentication_event(
                activity_id=ocsf.AuthActivity.LOGOFF,
                activity_name="Logoff",
                status_id=ocsf.Status.SUCCESS,
                severity_id=ocsf.Severity.INFORMATIONAL,
                user_email=ctx.user_email,
                message="User logged out",
            )
            return

        if self.error_policy == "ignore":
            return

        error = result.error or SessionInvalidationError("Unknown invalidation failure")
        logger.warning("Session invalidation failed, redirecting anyway: %r", error)
        ocsf.authentication_event(
            activity_id=ocsf.AuthActivity.LOGOFF,
            activity_name="Logoff",
            status_id=ocsf.Status.FAILURE,
            severity_id=ocsf.Severity.LOW,
            user_email=ctx.user_email,
            message=f"Session invalidation failed: {error.message}",
            extra_metadata={"error_code": error.code},
        )
