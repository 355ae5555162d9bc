"""OCSF (Open Cybersecurity Schema Framework) security event logging.

Each sign-in and sign-out is written to the ``ocsf`` logger as a single JSON
document. Deployments attach their own handler (CloudWatch, Firehose, a
JSON formatter) to ship them.

Usage::

    from . import ocsf
    ocsf.authentication_event(
        activity_id=ocsf.AuthActivity.LOGOFF,
        activity_name="Logoff",
        status_id=ocsf.Status.SUCCESS,
        severity_id=ocsf.Severity.INFORMATIONAL,
        user_email="user@example.com",
        message="User logged out",
    )
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

logger = logging.getLogger("ocsf")


class EventClass:
    AUTHENTICATION = 3001


class AuthActivity:
    LOGON = 1
    LOGOFF = 2


class Status:
    SUCCESS = 1
    FAILURE = 2


class Severity:
    INFORMATIONAL = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    CRITICAL = 5


class AuthProtocol:
    UNKNOWN = 0
    PASSWORD = 2
    OAUTH2 = 10


_SEVERITY_NAMES = {
    Severity.INFORMATIONAL: "Informational",
    Severity.LOW: "Low",
    Severity.MEDIUM: "Medium",
    Severity.HIGH: "High",
    Severity.CRITICAL: "Critical",
}

_PRODUCT = {
    "name": "draftgen-auth",
    "version": "0.1.0",
    "vendor_name": "Draft Gen",
}


def emit(event: dict[str, Any]) -> None:
    """Log an OCSF event as JSON. Logging failures are dropped, never raised."""
    try:
        logger.info(json.dumps(event, default=str))
    except Exception:
        pass


def authentication_event(
    *,
    activity_id: int,
    activity_name: str,
    status_id: int,
    severity_id: int,
    user_email: str | None = None,
    auth_protocol_id: int = AuthProtocol.UNKNOWN,
    auth_protocol: str = "Unknown",
    message: str = "",
    extra_metadata: dict[str, Any] | None = None,
) -> None:
    """Emit an OCSF Authentication (3001) event."""
    event: dict[str, Any] = {
        "class_uid": EventClass.AUTHENTICATION,
        "class_name": "Authentication",
        "activity_id": activity_id,
        "activity_name": activity_name,
        "severity_id": severity_id,
        "severity": _SEVERITY_NAMES.get(severity_id, "Unknown"),
        "status_id": status_id,
        "status": "Success" if status_id == Status.SUCCESS else "Failure",
        "time": int(time.time() * 1000),
        "metadata": {"product": _PRODUCT, **(extra_metadata or {})},
        "auth_protocol_id": auth_protocol_id,
        "auth_protocol": auth_protocol,
        "message": message,
    }
    if user_email:
        event["actor"] = {"user": {"email_addr": user_email, "type_id": 1, "type": "User"}}
    emit(event)


def email_from_session(session: dict[str, Any]) -> str | None:
    """Best-effort user email from the stored access token's claims."""
    from .supabase import decode_jwt_payload

    try:
        access_token = (session.get("tokens") or {}).get("access_token")
        if not access_token:
            return None
        return decode_jwt_payload(access_token).get("email")
    except Exception:
        return None
