"""Build the post-logout redirect."""

from __future__ import annotations

from fastapi.responses import RedirectResponse

from ..config import REDIRECT_STATUSES


def redirect_location(origin: str | None, destination: str) -> str:
    """``origin + destination``, or just ``destination`` without an origin."""
    if origin:
        return f"{origin}{destination}"
    return destination


def build_redirect(
    origin: str | None, destination: str, status_code: int = 307
) -> RedirectResponse:
    if status_code not in REDIRECT_STATUSES:
        raise ValueError(f"Not a redirect status: {status_code}")
    return RedirectResponse(redirect_location(origin, destination), status_code=status_code)
