"""
Base user directory interface.

Purpose:
    Define the one operation the guard needs from whatever service owns user
    accounts, so a database- or LDAP-backed directory can be injected without
    touching the guard or the routes.

Testing & Coverage:
    The abstract method is not executed directly in tests and is annotated
    with `# pragma: no cover`.
"""

from abc import ABC, abstractmethod

from ..schemas import LoginResult

__all__ = ["BaseUserDirectory"]


class BaseUserDirectory(ABC):
    """Abstract base class for user directories."""

    @abstractmethod  # pragma: no cover
    def login(self, username: str, password: str) -> LoginResult:
        """
        Validate a username/password pair.

        Args:
            username (str): Non-empty username supplied by the client.
            password (str): Password supplied by the client (may be empty).

        Returns:
            LoginResult: `success=True` with the user's identity when the pair
            is valid, otherwise `success=False`.
        """
        raise NotImplementedError
