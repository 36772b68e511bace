"""
User directory factory
======================

Centralizes selection of the user directory backend so the app factory can
stay ignorant of where accounts live.

Environment variables
---------------------
- HTTPAUTH_DIRECTORY_BACKEND: "memory" (default)

The environment is read at call time to avoid stale values in tests.
"""

import logging
from typing import Optional

from ..config import get_settings
from .base import BaseUserDirectory
from .memory import InMemoryUserDirectory

log = logging.getLogger("httpauth.directory")


def get_user_directory(backend: Optional[str] = None) -> BaseUserDirectory:
    """
    Return a user directory based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads HTTPAUTH_DIRECTORY_BACKEND.

    Raises
    ------
    ValueError
        If the backend name is unknown.
    """
    be = (backend or get_settings().DIRECTORY_BACKEND).lower()
    log.info("Selected user directory backend: %r", be)

    if be == "memory":
        return InMemoryUserDirectory.from_config()

    raise ValueError(f"Unknown user directory backend: {be!r}")
