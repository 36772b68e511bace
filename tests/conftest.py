"""
Global pytest fixtures for the httpauth test suite.

Responsibilities:
    - Keep HTTPAUTH_* environment variables from leaking into tests
    - Provide an in-memory user directory with a known account
    - Provide a fresh FastAPI TestClient via the app factory
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from httpauth.directory import InMemoryUserDirectory
from httpauth.guard import AuthGuard


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "HTTPAUTH_REALM",
        "HTTPAUTH_CHALLENGE_MESSAGE",
        "HTTPAUTH_DIRECTORY_BACKEND",
        "HTTPAUTH_DEMO_USER",
        "HTTPAUTH_DEMO_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """In-memory directory holding the single account bob/right."""
    return InMemoryUserDirectory({"bob": "right"})


@pytest.fixture
def guard(directory: InMemoryUserDirectory) -> AuthGuard:
    return AuthGuard(directory=directory)


@pytest.fixture
def client(directory: InMemoryUserDirectory) -> TestClient:
    """
    Provide a TestClient over a fresh app wired to the `directory` fixture.

    Notes:
        - Uses the app factory so every test gets its own guard instance.
    """
    return TestClient(create_app(directory=directory))
