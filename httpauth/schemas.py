"""
Pydantic schemas passed between the transport layer, the guard and the
user directory.
"""

from typing import Optional

from fastapi.security import HTTPBasicCredentials
from pydantic import BaseModel


class Credentials(HTTPBasicCredentials):
    """Username/password pair decoded from an `Authorization: Basic` header."""


class LoginResult(BaseModel):
    """Outcome of a user directory login attempt."""
    success: bool
    username: Optional[str] = None


class AuthDecision(BaseModel):
    """
    Result of evaluating a request's credentials.

    `reason` is only set on rejection and is meant for logs; every rejection
    produces the same challenge response.
    """
    allowed: bool
    user: Optional[LoginResult] = None
    reason: Optional[str] = None

    @classmethod
    def allow(cls, user: LoginResult) -> "AuthDecision":
        return cls(allowed=True, user=user)

    @classmethod
    def reject(cls, reason: str) -> "AuthDecision":
        return cls(allowed=False, reason=reason)
