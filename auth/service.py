"""
Core authentication logic.

This module looks users up in the injected user store and validates their
credentials against the stored bcrypt hash. Unknown user, wrong password and
inactive account all raise the same error so callers cannot tell them apart.
"""

from typing import Optional

from basic_auth_platform.models.user import User
from basic_auth_platform.storage.base import BaseUserStore
from .utils import dummy_hash, verify_password


class BadCredentialsError(Exception):
    """Raised when a username/password pair does not authenticate."""

    def __init__(self, message: str = "Bad credentials"):
        super().__init__(message)


def load_user_by_username(store: BaseUserStore, username: str) -> Optional[User]:
    """
    Return the user record for `username`, or None if there is none.

    Empty or non-string input is treated as "not found". Storage errors are
    left to propagate.
    """
    if not isinstance(username, str) or not username:
        return None
    return store.find_by_username(username)


def authenticate_user(store: BaseUserStore, username: str, password: str) -> User:
    """
    Authenticate a user by validating their username and password.

    Args:
        store (BaseUserStore): Where users are looked up.
        username (str): The username provided by the client.
        password (str): The plaintext password provided by the client.

    Returns:
        User: The authenticated user record.

    Raises:
        BadCredentialsError: If authentication fails for any reason.
    """
    user = load_user_by_username(store, username)

    if user is None:
        # Keep the unknown-user path as expensive as the wrong-password path.
        verify_password(password or "", dummy_hash())
        raise BadCredentialsError()

    if not user.is_active():
        raise BadCredentialsError()

    if not verify_password(password or "", user.password):
        raise BadCredentialsError()

    return user
