"""Tests for the session invalidation step."""

from unittest.mock import AsyncMock

import pytest

from draftgen_auth.errors import SessionInvalidationError
from draftgen_auth.termination import InvalidationResult, SessionHandle, invalidate_session


class _Auth:
    def __init__(self, **kwargs):
        self.invalidate_session = AsyncMock(**kwargs)


HANDLE = SessionHandle(access_token="token-abc", refresh_token="refresh-abc")


@pytest.mark.asyncio
async def test_success_passes_through():
    auth = _Auth(return_value=InvalidationResult.success())
    result = await invalidate_session(auth, HANDLE)
    assert result.ok
    assert result.error is None
    auth.invalidate_session.assert_awaited_once_with(HANDLE)


@pytest.mark.asyncio
async def test_failure_result_passes_through():
    err = SessionInvalidationError("Service unavailable", code="http_503", status_code=503)
    auth = _Auth(return_value=InvalidationResult.failure(err))
    result = await invalidate_session(auth, HANDLE)
    assert not result.ok
    assert result.error is err


@pytest.mark.asyncio
async def test_raised_invalidation_error_becomes_result():
    err = SessionInvalidationError("boom", code="network_error")
    auth = _Auth(side_effect=err)
    result = await invalidate_session(auth, HANDLE)
    assert not result.ok
    assert result.error is err


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_result():
    auth = _Auth(side_effect=RuntimeError("socket closed"))
    result = await invalidate_session(auth, HANDLE)
    assert not result.ok
    assert isinstance(result.error, SessionInvalidationError)
    assert result.error.code == "unexpected_error"
    assert "socket closed" in result.error.message


@pytest.mark.asyncio
async def test_no_handle_skips_provider():
    auth = _Auth(return_value=InvalidationResult.success())
    result = await invalidate_session(auth, None)
    assert result.ok
    auth.invalidate_session.assert_not_awaited()


def test_handle_from_session():
    handle = SessionHandle.from_session(
        {"tokens": {"access_token": "a", "refresh_token": "r"}}
    )
    assert handle == SessionHandle(access_token="a", refresh_token="r")


@pytest.mark.parametrize(
    "session",
    [{}, {"tokens": None}, {"tokens": {}}, {"tokens": {"access_token": ""}}],
)
def test_handle_from_empty_session(session):
    assert SessionHandle.from_session(session) is None
