"""
httpauth package initializer.

Provides HTTP Basic authentication for FastAPI applications: credentials are
read from the `Authorization` header, validated by an injected user directory,
and rejected with a 401 Basic challenge on failure.
"""

from .guard import AuthGuard
from .exceptions import AuthenticationRequired, install_auth_handlers
from .schemas import AuthDecision, Credentials, LoginResult

__all__ = [
    "AuthDecision",
    "AuthGuard",
    "AuthenticationRequired",
    "Credentials",
    "LoginResult",
    "install_auth_handlers",
]
