"""
Configuration for the auth module.

Defines the realm advertised to clients, the bcrypt cost factor, and the
users inserted into the store at startup. Values come from environment
variables with demo defaults.
"""

from typing import Dict, List
import os


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


REALM: str = os.getenv("BASICAUTH_REALM", "Realm")

# bcrypt accepts 4..31; anything above 16 makes every request noticeably slow.
BCRYPT_ROUNDS: int = max(4, min(16, _get_int("BASICAUTH_BCRYPT_ROUNDS", 10)))

# Seed user store (plaintext password is hashed before insertion).
SEED_USERS: List[Dict[str, str]] = [
    {
        "username": os.getenv("BASICAUTH_SEED_USERNAME", "admin"),
        "password": os.getenv("BASICAUTH_SEED_PASSWORD", "123"),
        "first_name": os.getenv("BASICAUTH_SEED_FIRST_NAME", "Admin"),
        "last_name": os.getenv("BASICAUTH_SEED_LAST_NAME", "User"),
    },
]
