"""
Main API module for the bookmarks API.

Responsibilities:
    - Build the FastAPI app and install the HTTP Basic authentication guard
    - Expose a public health check and authenticated API routes
    - Render authentication failures as a 401 Basic challenge

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The user directory is injected into the guard; by default it is chosen
      from the environment by `get_user_directory()`.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI

from httpauth import AuthGuard, LoginResult, install_auth_handlers
from httpauth.directory import BaseUserDirectory, get_user_directory


def create_app(
    directory: Optional[BaseUserDirectory] = None,
    realm: Optional[str] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        directory (Optional[BaseUserDirectory]): User directory the guard
            validates credentials against. Defaults to the configured backend.
        realm (Optional[str]): Realm advertised in the challenge header.

    Returns:
        FastAPI: A configured application with its own guard instance.
    """
    app = FastAPI(
        title="Bookmarks API",
        description="Bookmark API protected by HTTP Basic authentication",
        docs_url="/docs",
    )
    log = logging.getLogger("httpauth")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    if directory is None:
        directory = get_user_directory()
    guard = AuthGuard(directory=directory, realm=realm)
    install_auth_handlers(app)
    log.info("HTTP Basic auth enabled (realm=%r)", guard.realm)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Authenticated routes
    # ----------------------------------------------------------------
    @app.get("/api/user")
    def current_user(user: LoginResult = Depends(guard)) -> Dict[str, Any]:
        """
        Return the identity of the authenticated caller.

        Raises:
            AuthenticationRequired: Rendered as 401 when credentials are
                missing, malformed, or rejected by the directory.
        """
        return {"username": user.username}

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
