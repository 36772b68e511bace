"""
In-memory user directory.

Design:
    - Reference implementation of the BaseUserDirectory contract, used by the
      demo app and the test suite.
    - A stored password is either plain text or "sha256:<hex digest>". The
      prefix decides which single form a login attempt is compared against,
      so a client cannot log in by sending the stored digest itself.
    - Comparisons run in constant time.
    - For production, inject a directory backed by the real account service.
"""

import hashlib
import hmac
from typing import Dict, Optional

from ..config import get_settings
from ..schemas import LoginResult
from .base import BaseUserDirectory

SHA256_PREFIX = "sha256:"


def _digest(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _matches(stored: str, candidate: str) -> bool:
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))


class InMemoryUserDirectory(BaseUserDirectory):
    def __init__(self, users: Optional[Dict[str, str]] = None):
        """
        Args:
            users (Optional[Dict[str, str]]): username -> plain password or
                "sha256:<hex digest>" (see `hashed()`).
        """
        self.users: Dict[str, str] = dict(users or {})

    @staticmethod
    def hashed(password: str) -> str:
        """Return the stored form of a password kept as a SHA-256 digest."""
        return SHA256_PREFIX + _digest(password)

    @classmethod
    def from_config(cls) -> "InMemoryUserDirectory":
        """Build a directory seeded with the demo user from the environment."""
        settings = get_settings()
        return cls({settings.DEMO_USER: settings.DEMO_PASSWORD})

    def add_user(self, username: str, password: str) -> None:
        self.users[username] = password

    def login(self, username: str, password: str) -> LoginResult:
        stored = self.users.get(username)
        if stored is None:
            return LoginResult(success=False)

        if stored.startswith(SHA256_PREFIX):
            ok = _matches(stored[len(SHA256_PREFIX):], _digest(password))
        else:
            ok = _matches(stored, password)

        if ok:
            return LoginResult(success=True, username=username)
        return LoginResult(success=False)
