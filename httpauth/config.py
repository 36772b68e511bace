"""
Runtime configuration for httpauth
==================================

Reads environment variables (only here) and exposes them through
`get_settings()`. Avoid reading env vars anywhere else; import from this
module instead.

Challenge
---------
- HTTPAUTH_REALM              : realm advertised in WWW-Authenticate (default "del.icio.us API")
- HTTPAUTH_CHALLENGE_MESSAGE  : plain-text body of the 401 response

User directory
--------------
- HTTPAUTH_DIRECTORY_BACKEND  : "memory" (default)
- HTTPAUTH_DEMO_USER          : username seeded into the in-memory directory (default "demo")
- HTTPAUTH_DEMO_PASSWORD      : its password, plain text or "sha256:<hex digest>" (default "demo")

Settings are read at call time so tests can monkeypatch the environment
without reloading modules.
"""

import os

DEFAULT_REALM = "del.icio.us API"
DEFAULT_CHALLENGE_MESSAGE = "Use of the API calls requires authentication."


class _Settings:
    def __init__(self):
        # -------- Challenge --------
        self.REALM: str = os.getenv("HTTPAUTH_REALM") or DEFAULT_REALM
        self.CHALLENGE_MESSAGE: str = (
            os.getenv("HTTPAUTH_CHALLENGE_MESSAGE") or DEFAULT_CHALLENGE_MESSAGE
        )

        # -------- User directory --------
        self.DIRECTORY_BACKEND: str = (
            os.getenv("HTTPAUTH_DIRECTORY_BACKEND", "memory").strip().lower()
        )
        self.DEMO_USER: str = os.getenv("HTTPAUTH_DEMO_USER", "demo")
        self.DEMO_PASSWORD: str = os.getenv("HTTPAUTH_DEMO_PASSWORD", "demo")


def get_settings() -> _Settings:
    """Return a settings snapshot of the current environment."""
    return _Settings()
