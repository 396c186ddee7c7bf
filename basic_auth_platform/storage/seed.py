"""
Startup seeding of the user store.

The seed step inserts the configured users with hashed passwords before the
app serves traffic. `defer_seed` controls ordering against schema creation:

    defer_seed=True   ensure_schema() -> insert rows
    defer_seed=False  insert rows -> ensure_schema()

With a fresh PostgreSQL database, `defer_seed=False` fails on the first insert
because the table does not exist yet.
"""

from typing import Callable, Iterable, Mapping
import logging

from .base import BaseUserStore
from ..models.user import User

log = logging.getLogger("basicauth.seed")


def seed_users(
    store: BaseUserStore,
    users: Iterable[Mapping[str, str]],
    hasher: Callable[[str], str],
) -> int:
    """
    Insert each user (plaintext `password` is hashed with `hasher`).

    Usernames already present are skipped, so re-running is harmless.

    Returns:
        int: Number of rows actually inserted.
    """
    inserted = 0
    for entry in users:
        user = User(
            first_name=entry["first_name"],
            last_name=entry["last_name"],
            username=entry["username"],
            password=hasher(entry["password"]),
        )
        stored = store.save_user(user)
        if stored is None:
            log.info("Seed user %r already present, skipping", user.username)
            continue
        log.info("Seeded user %r (id=%s)", stored.username, stored.id)
        inserted += 1
    return inserted


def initialize_user_store(
    store: BaseUserStore,
    users: Iterable[Mapping[str, str]],
    hasher: Callable[[str], str],
    defer_seed: bool = True,
) -> int:
    """Create the schema and seed users in the order selected by `defer_seed`."""
    if defer_seed:
        store.ensure_schema()
        return seed_users(store, users, hasher)

    inserted = seed_users(store, users, hasher)
    store.ensure_schema()
    return inserted
