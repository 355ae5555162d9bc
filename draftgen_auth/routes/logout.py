"""POST /auth/logout: Sign out with Supabase and redirect."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from ..dependencies import destroy_session, get_termination_service, request_context
from ..termination import RequestContext, SessionTerminationService

router = APIRouter()


@router.post("/auth/logout")
async def logout(
    request: Request,
    ctx: RequestContext = Depends(request_context),
    service: SessionTerminationService = Depends(get_termination_service),
) -> RedirectResponse:
    response = await service.terminate(ctx)
    destroy_session(request)
    return response
