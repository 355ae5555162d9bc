"""Sign-out against a live Supabase project.

Skipped unless these are set:
    SUPABASE_URL, SUPABASE_ANON_KEY
    SUPABASE_TEST_EMAIL, SUPABASE_TEST_PASSWORD  (an existing confirmed user)
"""

from __future__ import annotations

import os

import httpx
import pytest

from draftgen_auth.config import Settings
from draftgen_auth.errors import AuthError
from draftgen_auth.supabase import SupabaseAuth
from draftgen_auth.termination import SessionHandle

_ENV = ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_TEST_EMAIL", "SUPABASE_TEST_PASSWORD")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not all(os.environ.get(k) for k in _ENV),
        reason="Supabase credentials not configured",
    ),
]


@pytest.fixture
def live_settings() -> Settings:
    return Settings()


async def _password_sign_in(s: Settings) -> str:
    async with httpx.AsyncClient(base_url=s.supabase_auth_url) as client:
        resp = await client.post(
            "/token",
            params={"grant_type": "password"},
            headers={"apikey": s.supabase_anon_key},
            json={
                "email": os.environ["SUPABASE_TEST_EMAIL"],
                "password": os.environ["SUPABASE_TEST_PASSWORD"],
            },
        )
    resp.raise_for_status()
    return resp.json()["access_token"]


@pytest.mark.asyncio
async def test_sign_out_revokes_session(live_settings):
    auth = SupabaseAuth(live_settings)
    token = await _password_sign_in(live_settings)

    user = await auth.get_user(token)
    assert user["email"] == os.environ["SUPABASE_TEST_EMAIL"]

    result = await auth.invalidate_session(SessionHandle(access_token=token))
    assert result.ok


@pytest.mark.asyncio
async def test_second_sign_out_is_still_ok(live_settings):
    auth = SupabaseAuth(live_settings)
    token = await _password_sign_in(live_settings)

    assert (await auth.invalidate_session(SessionHandle(access_token=token))).ok
    assert (await auth.invalidate_session(SessionHandle(access_token=token))).ok


@pytest.mark.asyncio
async def test_get_user_rejects_garbage(live_settings):
    with pytest.raises(AuthError):
        await SupabaseAuth(live_settings).get_user("not-a-token")
