"""FastAPI auth backend for Draft Gen.

Holds Supabase tokens in server-side sessions and implements sign-out:
revoke the session with Supabase, then always redirect to the configured
post-logout page.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import health, logout, session_ep
from .session import InMemoryBackend, SessionBackend, SessionMiddleware
from .supabase import SupabaseAuth
from .termination import SessionTerminationService

logger = logging.getLogger(__name__)


def create_app(
    *,
    session_backend: SessionBackend | None = None,
    auth=None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session_backend: Custom session backend (default: InMemoryBackend).
        auth: Auth capability (default: SupabaseAuth from settings).
    """
    s = get_settings()
    app = FastAPI(title="Draft Gen Auth")

    app.state.auth = auth or SupabaseAuth(s)
    app.state.termination = SessionTerminationService.from_settings(app.state.auth, s)
    logger.info(
        "Logout redirects to %s (status %d, invalidation errors: %s)",
        s.logout_destination,
        s.logout_redirect_status,
        s.invalidation_error_policy,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[s.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        SessionMiddleware,
        secret=s.session_secret,
        backend=session_backend or InMemoryBackend(),
        https_only=s.session_https_only,
    )

    app.include_router(session_ep.router)
    app.include_router(logout.router)
    app.include_router(health.router)

    return app
