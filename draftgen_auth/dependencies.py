"""FastAPI dependency injection: session access, CSRF, auth collaborators."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from . import ocsf
from .supabase import SupabaseAuth
from .termination import RequestContext, SessionHandle, SessionTerminationService

CSRF_HEADER = "x-draftgen-csrf"


def get_session(request: Request) -> dict[str, Any]:
    return request.state.session


def require_csrf(request: Request) -> None:
    """Require X-Draftgen-CSRF: 1 on requests that create sessions."""
    if request.headers.get(CSRF_HEADER) != "1":
        raise HTTPException(
            status_code=403,
            detail={
                "error": "CSRF validation failed",
                "message": "Missing X-Draftgen-CSRF header",
            },
        )


def get_auth(request: Request) -> SupabaseAuth:
    return request.app.state.auth


def get_termination_service(request: Request) -> SessionTerminationService:
    return request.app.state.termination


def request_context(request: Request) -> RequestContext:
    """Snapshot the headers and session the logout flow needs."""
    session = request.state.session
    return RequestContext(
        headers=request.headers,
        session_handle=SessionHandle.from_session(session),
        user_email=ocsf.email_from_session(session),
    )


def destroy_session(request: Request) -> None:
    """Mark the session for destruction."""
    request.state.session_destroyed = True
    request.state.session.clear()
