"""GET /health: Liveness check."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "logout_destination": request.app.state.termination.destination,
    }
