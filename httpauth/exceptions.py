"""
Authentication error and its HTTP rendering.

`AuthenticationRequired` is the only failure the guard reports. Missing,
malformed and rejected credentials all raise it, and the handler installed by
`install_auth_handlers()` turns it into a 401 Basic challenge with a plain-text
body. Processing of the request stops there; the protected route never runs.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from .config import DEFAULT_CHALLENGE_MESSAGE, DEFAULT_REALM


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class AuthenticationRequired(Exception):
    """Raised when a request to a protected route is not authenticated."""

    def __init__(
        self,
        realm: str = DEFAULT_REALM,
        message: str = DEFAULT_CHALLENGE_MESSAGE,
        reason: str = "",
    ):
        super().__init__(message)
        self.realm = realm
        self.message = message
        self.reason = reason

    @property
    def headers(self) -> dict:
        return {"WWW-Authenticate": f'Basic realm="{_quote(self.realm)}"'}


def challenge_response(exc: AuthenticationRequired) -> PlainTextResponse:
    """Build the 401 challenge response for an authentication failure."""
    return PlainTextResponse(
        exc.message,
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers=exc.headers,
    )


async def _handle_authentication_required(
    request: Request, exc: AuthenticationRequired
) -> PlainTextResponse:
    return challenge_response(exc)


def install_auth_handlers(app: FastAPI) -> None:
    """Register the challenge handler on a FastAPI app."""
    app.add_exception_handler(AuthenticationRequired, _handle_authentication_required)
