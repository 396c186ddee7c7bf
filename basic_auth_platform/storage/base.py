"""
Base user-store interface for the Basic-Auth platform.

Purpose:
    Define a small, stable contract that multiple storage backends
    (in-memory, PostgreSQL) can implement without requiring changes
    to the authentication layer.

Testing & Coverage:
    Abstract methods are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.

LLM Prompt Example:
    "Show how a narrow repository interface with a single derived query
    (find by username) keeps the authentication code storage-agnostic."
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class BaseUserStore(ABC):
    """Abstract base class for user storage backends."""

    @abstractmethod  # pragma: no cover
    def find_by_username(self, username: str) -> Optional[User]:
        """
        Retrieve a user by exact, case-sensitive username.

        Returns:
            Optional[User]: The matching record, or None if no record has that username.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def save_user(self, user: User) -> Optional[User]:
        """
        Insert a new user record.

        Returns:
            Optional[User]: The stored record with its generated `id`, or None
            when the username is already taken (uniqueness is enforced here).
        """
        raise NotImplementedError

    def ensure_schema(self) -> None:
        """Create backing tables if the backend needs them. No-op by default."""
        return None
