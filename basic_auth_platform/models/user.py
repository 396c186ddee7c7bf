"""
User record for the Basic-Auth platform.

Responsibilities:
    - Hold the five persisted attributes of a user (id, names, username, password hash)
    - Expose the account-status flags the authentication check consults

Design:
    - Immutable pydantic model; records are read-only once seeded.
    - Status flags are plain methods rather than an inherited interface.
      Every stored record is enabled, unexpired and unlocked; the table has
      no columns to express anything else.

LLM Prompt Example:
    "Show how to model a 'user details' capability as a plain record with
    boolean status methods instead of implementing a framework interface."
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A row of the `users` table. `password` is always a bcrypt hash."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    first_name: str
    last_name: str
    username: str
    password: str

    @property
    def authorities(self) -> List[str]:
        return []

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_enabled(self) -> bool:
        return True

    def is_account_non_expired(self) -> bool:
        return True

    def is_account_non_locked(self) -> bool:
        return True

    def is_credentials_non_expired(self) -> bool:
        return True

    def is_active(self) -> bool:
        """True when every status flag allows the user to authenticate."""
        return (
            self.is_enabled()
            and self.is_account_non_expired()
            and self.is_account_non_locked()
            and self.is_credentials_non_expired()
        )
