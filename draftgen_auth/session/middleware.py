"""ASGI server-side session middleware.

The cookie carries only a signed session ID; the session data (Supabase
access and refresh tokens) stays on the server in a SessionBackend.
"""

from __future__ import annotations

import secrets
from typing import Any

from itsdangerous import BadSignature, URLSafeTimedSerializer
from starlette.datastructures import MutableHeaders
from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .backend import InMemoryBackend, SessionBackend

COOKIE_NAME = "draftgen_session"
MAX_AGE = 7 * 24 * 3600  # 7 days


class SessionMiddleware:
    """Attach ``request.state.session`` and persist it after the response.

    Handlers end a session by setting ``request.state.session_destroyed``;
    the middleware then deletes it from the backend and expires the cookie.
    """

    def __init__(
        self,
        app: ASGIApp,
        secret: str,
        backend: SessionBackend | None = None,
        cookie_name: str = COOKIE_NAME,
        max_age: int = MAX_AGE,
        https_only: bool = False,
        same_site: str = "lax",
    ) -> None:
        self.app = app
        self.signer = URLSafeTimedSerializer(secret, salt="draftgen-session")
        self.backend = backend or InMemoryBackend(max_age=max_age)
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.https_only = https_only
        self.same_site = same_site

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        conn = HTTPConnection(scope)
        session_id = self._read_session_id(conn)
        initial: dict[str, Any] = {}

        if session_id:
            loaded = await self.backend.load(session_id)
            if loaded is None:
                session_id = None
            else:
                initial = loaded

        is_new = session_id is None
        if session_id is None:
            session_id = secrets.token_urlsafe(32)

        state = scope.setdefault("state", {})
        state["session"] = dict(initial)
        state["session_id"] = session_id
        state["session_destroyed"] = False

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                data: dict[str, Any] = state["session"]
                headers = MutableHeaders(scope=message)

                if state.get("session_destroyed"):
                    await self.backend.delete(session_id)
                    headers.append("set-cookie", self._cookie(session_id, delete=True))
                elif data and (data != initial or is_new):
                    await self.backend.save(session_id, data)
                    headers.append("set-cookie", self._cookie(session_id))

            await send(message)

        await self.app(scope, receive, send_wrapper)

    def _read_session_id(self, conn: HTTPConnection) -> str | None:
        raw = conn.cookies.get(self.cookie_name)
        if not raw:
            return None
        try:
            return self.signer.loads(raw, max_age=self.max_age)
        except BadSignature:
            return None

    def _cookie(self, session_id: str, *, delete: bool = False) -> str:
        value = "" if delete else self.signer.dumps(session_id)
        parts = [
            f"{self.cookie_name}={value}",
            f"Max-Age={0 if delete else self.max_age}",
            "Path=/",
            "HttpOnly",
            f"SameSite={self.same_site}",
        ]
        if self.https_only:
            parts.append("Secure")
        return "; ".join(parts)
