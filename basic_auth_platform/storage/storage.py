"""
User store module (in-memory implementation).

Responsibilities:
    - Save user records and assign sequential ids
    - Look users up by exact username
    - Enforce username uniqueness

Design:
    - In-memory reference implementation of the BaseUserStore contract.
    - Kept simple so unit/integration tests stay fast and deterministic.
    - For persistent deployments use DBUserStore (PostgreSQL).
"""

import itertools
from typing import Dict, Optional

from .base import BaseUserStore
from ..models.user import User


class UserStore(BaseUserStore):
    def __init__(self):
        """
        Initialize an empty store.

        Internal schema:
            self.users = {username: User}
        """
        self.users: Dict[str, User] = {}
        self._ids = itertools.count(1)

    def find_by_username(self, username: str) -> Optional[User]:
        if not isinstance(username, str) or not username:
            return None
        return self.users.get(username)

    def save_user(self, user: User) -> Optional[User]:
        """
        Insert a user unless the username is already taken.

        Rules:
            - Empty username is rejected.
            - Duplicate username is rejected (the existing record is kept).

        Returns:
            Optional[User]: Stored copy with `id` assigned, or None on rejection.
        """
        if not user.username or user.username in self.users:
            return None
        stored = user.model_copy(update={"id": next(self._ids)})
        self.users[stored.username] = stored
        return stored
