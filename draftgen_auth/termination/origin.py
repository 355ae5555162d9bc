"""Resolve the scheme+host a request originated from."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from urllib.parse import urlsplit

_ALLOWED_SCHEMES = ("http", "https")
_HOST_RE = re.compile(r"^[a-z0-9.\-]+$|^\[[0-9a-f:.]+\]$")


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, v in headers.items():
        if key.lower() == name:
            return v
    return None


def normalize_origin(value: str) -> str | None:
    """Reduce ``value`` to ``scheme://host[:port]``, or None if it isn't one.

    Path, query, fragment and userinfo are dropped; they never reach a
    redirect target.
    """
    value = value.strip()
    if not value or value.lower() == "null":
        return None

    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        return None

    host = parts.hostname
    if not host:
        return None
    if ":" in host:
        host = f"[{host}]"
    if not _HOST_RE.match(host):
        return None

    try:
        port = parts.port
    except ValueError:
        return None

    return f"{scheme}://{host}:{port}" if port is not None else f"{scheme}://{host}"


def resolve_origin(
    headers: Mapping[str, str], trusted_origins: Iterable[str] = ()
) -> str | None:
    """Return the request origin from the ``Origin`` header.

    Lookup is case-insensitive. An absent, opaque or malformed header gives
    None, as does an origin outside ``trusted_origins`` when that list is
    non-empty.
    """
    raw = _header(headers, "origin")
    if raw is None:
        return None

    origin = normalize_origin(raw)
    if origin is None:
        return None

    trusted = {t for t in (normalize_origin(o) for o in trusted_origins) if t}
    if trusted and origin not in trusted:
        return None
    return origin
