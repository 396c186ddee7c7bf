"""
Global pytest fixtures for the Basic-Auth platform test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide an isolated in-memory UserStore, empty or seeded, for direct testing

bcrypt is slow on purpose; the cost factor is lowered before any project
module reads its configuration.
"""

import os

os.environ.setdefault("BASICAUTH_BCRYPT_ROUNDS", "4")
os.environ.setdefault("BASICAUTH_STORAGE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from auth.config import SEED_USERS
from auth.utils import hash_password
from basic_auth_platform.storage.seed import seed_users
from basic_auth_platform.storage.storage import UserStore
from main import create_app


@pytest.fixture
def store() -> UserStore:
    """Provide a fresh, empty in-memory UserStore."""
    return UserStore()


@pytest.fixture
def seeded_store(store: UserStore) -> UserStore:
    """Provide an in-memory UserStore holding the configured seed users."""
    seed_users(store, SEED_USERS, hash_password)
    return store


@pytest.fixture
def client() -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Uses the app factory so every test gets its own seeded store.
    """
    app = create_app(user_store=UserStore())
    return TestClient(app)
