"""
HTTP Basic authentication guard.

Responsibilities:
    - Decide whether a request's credentials grant access (`authorize`)
    - Act as a FastAPI dependency that lets authenticated requests through
      and raises `AuthenticationRequired` for everything else
    - Register the HTTP Basic security scheme in the app's OpenAPI schema,
      so `/docs` offers an "Authorize" button

Design:
    - The guard is an `HTTPBasic` security scheme with `auto_error=False`.
      Missing and unreadable headers both come back as no credentials, so
      every failure ends in the same challenge.
    - The user directory is injected through the constructor; the guard never
      looks it up from shared state.
    - The guard keeps no state between requests, so one instance can serve
      concurrent requests.
    - The directory is called at most once per request and never for an
      absent or empty username.

Usage:
    guard = AuthGuard(directory=InMemoryUserDirectory({"bob": "secret"}))

    @app.get("/api/user")
    def current_user(user: LoginResult = Depends(guard)): ...
"""

import base64
import binascii
import logging
from typing import Optional

from fastapi import Request
from fastapi.security import HTTPBasic
from fastapi.security.utils import get_authorization_scheme_param

from .config import get_settings
from .directory.base import BaseUserDirectory
from .exceptions import AuthenticationRequired
from .schemas import AuthDecision, Credentials, LoginResult

log = logging.getLogger("httpauth.guard")


class AuthGuard(HTTPBasic):
    def __init__(
        self,
        directory: BaseUserDirectory,
        realm: Optional[str] = None,
        message: Optional[str] = None,
    ):
        """
        Args:
            directory (BaseUserDirectory): Service that validates credentials.
            realm (Optional[str]): Realm advertised in the challenge. Defaults
                to HTTPAUTH_REALM.
            message (Optional[str]): Body of the 401 response. Defaults to
                HTTPAUTH_CHALLENGE_MESSAGE.
        """
        settings = get_settings()
        super().__init__(
            scheme_name="HTTPBasic",
            realm=realm or settings.REALM,
            description="Account name and password",
            auto_error=False,
        )
        self.directory = directory
        self.message = message or settings.CHALLENGE_MESSAGE

    def read_credentials(self, request: Request) -> Optional[Credentials]:
        """
        Decode the request's `Authorization: Basic <base64(user:pass)>` header.

        Returns:
            Optional[Credentials]: The decoded pair, or None when the header is
            missing, uses another scheme, or cannot be decoded.

        Notes:
            - The scheme name is matched case-insensitively.
            - Credentials are decoded as UTF-8.
            - Only the first ':' separates username from password, so passwords
              may contain colons.
        """
        scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() != "basic" or not param:
            return None

        try:
            decoded = base64.b64decode(param, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None

        username, sep, password = decoded.partition(":")
        if not sep:
            return None
        return Credentials(username=username, password=password)

    def authorize(self, credentials: Optional[Credentials]) -> AuthDecision:
        """
        Evaluate credentials against the user directory.

        Args:
            credentials (Optional[Credentials]): Decoded header, or None when
                the header was absent or unreadable.

        Returns:
            AuthDecision: Allowed with the directory's LoginResult, or rejected
            with a reason for logging.
        """
        if credentials is None:
            return AuthDecision.reject("missing_credentials")
        if not credentials.username:
            return AuthDecision.reject("empty_username")

        result = self.directory.login(credentials.username, credentials.password)
        if not result.success:
            return AuthDecision.reject("login_failed")

        if result.username is None:
            result = result.model_copy(update={"username": credentials.username})
        return AuthDecision.allow(result)

    def challenge(self, reason: str = "") -> AuthenticationRequired:
        """Return the error that renders this guard's 401 challenge."""
        return AuthenticationRequired(realm=self.realm, message=self.message, reason=reason)

    def __call__(self, request: Request) -> LoginResult:  # type: ignore[override]
        """
        FastAPI dependency entry point.

        Raises:
            AuthenticationRequired: If the request is not authenticated.
        """
        credentials = self.read_credentials(request)
        decision = self.authorize(credentials)

        if not decision.allowed:
            log.info(
                "Rejected %s %s: %s (user=%r)",
                request.method,
                request.url.path,
                decision.reason,
                credentials.username if credentials is not None else None,
            )
            raise self.challenge(decision.reason or "")

        log.debug("Authenticated user %r", decision.user.username)
        return decision.user
