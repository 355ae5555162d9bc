"""Errors raised by the authentication collaborator."""

from __future__ import annotations


class AuthError(Exception):
    """Base class for failures reported by the auth provider."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "unknown_error",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, status_code={self.status_code!r}, message={self.message!r})"


class SessionInvalidationError(AuthError):
    """The provider could not terminate the session.

    The logout flow reports this and keeps going; it never reaches the client.
    """
