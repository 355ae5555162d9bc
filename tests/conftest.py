"""Shared fixtures for the auth backend test suite."""

from __future__ import annotations

import time
from unittest.mock import AsyncMock

import jwt
import pytest
from fastapi.testclient import TestClient

from draftgen_auth.config import Settings, override_settings
from draftgen_auth.main import create_app
from draftgen_auth.session import InMemoryBackend
from draftgen_auth.termination import InvalidationResult

JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"


# ── Tokens ────────────────────────────────────────────────────────────────

@pytest.fixture
def make_token():
    """Factory for Supabase-style access tokens."""

    def _make(
        sub: str = "user-123",
        email: str = "test@example.com",
        exp: int | None = None,
    ) -> str:
        now = int(time.time())
        payload = {
            "sub": sub,
            "email": email,
            "role": "authenticated",
            "aud": "authenticated",
            "iat": now,
            "exp": exp or (now + 3600),
        }
        return jwt.encode(payload, JWT_SECRET, algorithm="HS256")

    return _make


@pytest.fixture
def access_token(make_token) -> str:
    return make_token()


# ── Auth capability ──────────────────────────────────────────────────────

class FakeAuth:
    """Stand-in for SupabaseAuth with scriptable results."""

    def __init__(self) -> None:
        self.invalidate_session = AsyncMock(return_value=InvalidationResult.success())
        self.get_user = AsyncMock(
            return_value={"id": "user-123", "email": "test@example.com"}
        )


@pytest.fixture
def fake_auth() -> FakeAuth:
    return FakeAuth()


# ── Test Settings ─────────────────────────────────────────────────────────

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        supabase_url="https://project.supabase.co",
        supabase_anon_key="test-anon-key",
        session_secret="test-secret-key-for-sessions",
        frontend_url="http://localhost:3000",
        logout_destination="/login",
    )


# ── App & Client ──────────────────────────────────────────────────────────

@pytest.fixture
def session_backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def app(test_settings, session_backend, fake_auth):
    override_settings(test_settings)
    return create_app(session_backend=session_backend, auth=fake_auth)


@pytest.fixture
def client(app) -> TestClient:
    """TestClient with cookie persistence that leaves redirects alone."""
    return TestClient(app, cookies={}, follow_redirects=False)


@pytest.fixture
def csrf_headers() -> dict[str, str]:
    return {"X-Draftgen-CSRF": "1"}


@pytest.fixture
def auth_session(client, access_token, csrf_headers):
    """A client holding a server-side session with Supabase tokens."""
    resp = client.post(
        "/auth/session",
        json={
            "access_token": access_token,
            "refresh_token": "test-refresh-token",
            "auth_method": "password",
        },
        headers=csrf_headers,
    )
    assert resp.status_code == 200
    return client
