"""Supabase Auth (GoTrue) integration: sign-out and user lookup."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import jwt

from .config import Settings, get_settings
from .errors import AuthError, SessionInvalidationError
from .termination.invalidator import InvalidationResult, SessionHandle

logger = logging.getLogger(__name__)

# GoTrue answers these when the session is already gone; supabase-js treats
# them as a completed sign-out too.
_ALREADY_SIGNED_OUT = (401, 403, 404)


def decode_jwt_payload(token: str) -> dict[str, Any]:
    """Decode a JWT payload without verification (for server-trusted tokens)."""
    return jwt.decode(token, options={"verify_signature": False})


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(data, dict):
        return (
            data.get("msg")
            or data.get("message")
            or data.get("error_description")
            or data.get("error")
            or f"HTTP {resp.status_code}"
        )
    return f"HTTP {resp.status_code}"


class SupabaseAuth:
    """Auth capability backed by the Supabase Auth REST API.

    Args:
        settings: Defaults to the application settings.
        transport: Custom httpx transport (for testing).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _client(self) -> httpx.AsyncClient:
        s = self.settings
        return httpx.AsyncClient(
            base_url=s.supabase_auth_url,
            headers={"apikey": s.supabase_anon_key},
            timeout=s.supabase_timeout,
            transport=self._transport,
        )

    async def sign_out(self, access_token: str, scope: str = "local") -> None:
        """Revoke the session behind ``access_token``.

        Raises:
            SessionInvalidationError: the provider refused or was unreachable.
        """
        try:
            async with self._client() as client:
                resp = await client.post(
                    "/logout",
                    params={"scope": scope},
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.TimeoutException as e:
            raise SessionInvalidationError(f"Sign-out timed out: {e}", code="timeout") from e
        except httpx.HTTPError as e:
            raise SessionInvalidationError(f"Sign-out request failed: {e}", code="network_error") from e

        if resp.is_success or resp.status_code in _ALREADY_SIGNED_OUT:
            return

        raise SessionInvalidationError(
            _error_message(resp),
            code=f"http_{resp.status_code}",
            status_code=resp.status_code,
        )

    async def invalidate_session(self, handle: SessionHandle) -> InvalidationResult:
        try:
            await self.sign_out(handle.access_token)
        except SessionInvalidationError as e:
            return InvalidationResult.failure(e)
        return InvalidationResult.success()

    async def get_user(self, access_token: str) -> dict[str, Any]:
        """Return the user the access token belongs to.

        Raises:
            AuthError: the token was rejected or the provider was unreachable.
        """
        try:
            async with self._client() as client:
                resp = await client.get(
                    "/user", headers={"Authorization": f"Bearer {access_token}"}
                )
        except httpx.HTTPError as e:
            raise AuthError(f"User lookup failed: {e}", code="network_error") from e

        if not resp.is_success:
            raise AuthError(
                _error_message(resp),
                code=f"http_{resp.status_code}",
                status_code=resp.status_code,
            )
        return resp.json()
