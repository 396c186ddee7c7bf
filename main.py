"""
Main API module for the Basic-Auth user platform.

Responsibilities:
    - Seed the user store at startup (schema first or rows first, per config)
    - Chain HTTP Basic authentication and the authorization policy in front of all routes
    - Expose a protected greeting (/secured) and a public catch-all greeting

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory user store by default; PostgreSQL via BASICAUTH_STORAGE_BACKEND=postgres.
    - Security is one middleware composed here, not scattered across routes.

LLM Prompt Example:
    "Explain how to protect a single FastAPI route with HTTP Basic auth backed by
    a database user table, while every other path stays public."
"""

from typing import Optional
import logging

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from auth.config import REALM, SEED_USERS
from auth.dependencies import get_current_user
from auth.middleware import BasicAuthMiddleware
from auth.policy import AuthorizationPolicy
from auth.utils import hash_password
from basic_auth_platform.config import settings
from basic_auth_platform.models.user import User
from basic_auth_platform.storage.base import BaseUserStore
from basic_auth_platform.storage.seed import initialize_user_store
from basic_auth_platform.storage.storage_factory import get_user_store


def create_app(
    user_store: Optional[BaseUserStore] = None,
    policy: Optional[AuthorizationPolicy] = None,
    defer_seed: Optional[bool] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        user_store: Store to authenticate against. Defaults to the configured backend.
        policy: Authorization rules. Defaults to `/secured` protected, everything else public.
        defer_seed: Create the schema before seeding. Defaults to settings.DEFER_DATASOURCE_INIT.

    Returns:
        FastAPI: A configured application with its own, already seeded, user store.
    """
    app = FastAPI(
        title="Basic-Auth User Platform",
        description="HTTP Basic authentication against a database-backed user store",
        docs_url="/docs",
    )
    log = logging.getLogger("basicauth")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    store = user_store if user_store is not None else get_user_store()
    if defer_seed is None:
        defer_seed = settings.DEFER_DATASOURCE_INIT

    log.info("User storage backend: %s", type(store).__name__)
    inserted = initialize_user_store(store, SEED_USERS, hash_password, defer_seed=defer_seed)
    log.info("Seeded %d user(s) (defer_seed=%s)", inserted, defer_seed)

    app.add_middleware(
        BasicAuthMiddleware,
        user_store=store,
        policy=policy or AuthorizationPolicy(),
        realm=REALM,
    )

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/secured", response_class=PlainTextResponse)
    def secured(user: User = Depends(get_current_user)) -> str:
        """Greet the authenticated user by first and last name."""
        return f"Hello {user.full_name}"

    @app.get("/{full_path:path}", response_class=PlainTextResponse)
    def hello(full_path: str) -> str:
        return "Hello World"

    return app


# `uvicorn main:app --reload` and `from main import app` keep working.
app = create_app()
