from .invalidator import AuthCapability, InvalidationResult, SessionHandle, invalidate_session
from .origin import normalize_origin, resolve_origin
from .responder import build_redirect, redirect_location
from .service import RequestContext, SessionTerminationService

__all__ = [
    "AuthCapability",
    "InvalidationResult",
    "SessionHandle",
    "invalidate_session",
    "normalize_origin",
    "resolve_origin",
    "build_redirect",
    "redirect_location",
    "RequestContext",
    "SessionTerminationService",
]
