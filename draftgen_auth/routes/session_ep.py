"""POST /auth/session: Store Supabase tokens after sign-in."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import ocsf
from ..dependencies import get_auth, require_csrf
from ..errors import AuthError
from ..supabase import SupabaseAuth

logger = logging.getLogger(__name__)

router = APIRouter()


class SessionRequest(BaseModel):
    access_token: str
    refresh_token: str | None = None
    auth_method: str = "password"


_PROTOCOLS = {
    "password": (ocsf.AuthProtocol.PASSWORD, "Password"),
    "oauth": (ocsf.AuthProtocol.OAUTH2, "OAuth 2.0/OIDC"),
}


@router.post("/auth/session")
async def create_session(
    body: SessionRequest,
    request: Request,
    _csrf: None = Depends(require_csrf),
    auth: SupabaseAuth = Depends(get_auth),
):
    if not body.access_token:
        return JSONResponse({"error": "Missing access_token"}, status_code=400)

    proto_id, proto_name = _PROTOCOLS.get(
        body.auth_method, (ocsf.AuthProtocol.UNKNOWN, "Unknown")
    )

    try:
        user = await auth.get_user(body.access_token)
    except AuthError as e:
        logger.error("Token verification failed: %r", e)
        ocsf.authentication_event(
            activity_id=ocsf.AuthActivity.LOGON,
            activity_name="Logon",
            status_id=ocsf.Status.FAILURE,
            severity_id=ocsf.Severity.MEDIUM,
            auth_protocol_id=proto_id,
            auth_protocol=proto_name,
            message="Session creation failed: token verification error",
        )
        return JSONResponse({"error": "Token verification failed"}, status_code=403)

    request.state.session["tokens"] = {
        "access_token": body.access_token,
        "refresh_token": body.refresh_token,
        "auth_method": body.auth_method,
    }
    request.state.session["user_id"] = user.get("id")

    ocsf.authentication_event(
        activity_id=ocsf.AuthActivity.LOGON,
        activity_name="Logon",
        status_id=ocsf.Status.SUCCESS,
        severity_id=ocsf.Severity.INFORMATIONAL,
        user_email=user.get("email") or ocsf.email_from_session(request.state.session),
        auth_protocol_id=proto_id,
        auth_protocol=proto_name,
        message="Session created",
    )

    return {"success": True}
