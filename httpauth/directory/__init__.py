"""
User directory backends.

A user directory validates a username/password pair. The guard only depends
on the `BaseUserDirectory` contract; backends are chosen by
`get_user_directory()`.
"""

from .base import BaseUserDirectory
from .memory import InMemoryUserDirectory
from .directory_factory import get_user_directory

__all__ = ["BaseUserDirectory", "InMemoryUserDirectory", "get_user_directory"]
