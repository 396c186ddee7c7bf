"""
User-store factory – switch storage backend from config (lazy env version)
=========================================================================

Centralizes selection of the storage backend (in-memory vs PostgreSQL) so the
rest of the app stays ignorant of where users live.

- Reads environment **at call time** to avoid stale values in tests.
- Imports the DB backend **only if** the selected backend is "postgres".

Environment variables
---------------------
- BASICAUTH_STORAGE_BACKEND: "memory" (default) or "postgres"
- BASICAUTH_DB_DSN:          DSN string if backend=="postgres"
"""

from typing import Optional
import logging
import os

from basic_auth_platform.storage.storage import UserStore

log = logging.getLogger("basicauth.storage")


def get_user_store(backend: Optional[str] = None, **kwargs):
    """
    Return a BaseUserStore implementation based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default) or "postgres". If omitted, reads BASICAUTH_STORAGE_BACKEND.
    kwargs : dict
        Extra args for the backend constructor. For postgres, use dsn="...".
    """
    be = (backend or os.getenv("BASICAUTH_STORAGE_BACKEND", "memory")).strip().lower()
    log.debug("Selected storage backend: %r", be)

    if be == "memory":
        return UserStore()

    if be == "postgres":
        dsn = kwargs.get("dsn") or os.getenv("BASICAUTH_DB_DSN", "")
        if not dsn:
            raise ValueError("DB_DSN is required for postgres backend (env BASICAUTH_DB_DSN)")
        # Local import to avoid hard dependency when not using postgres
        from basic_auth_platform.storage.db_storage import DBUserStore
        return DBUserStore(dsn=dsn)

    raise ValueError(f"Unknown storage backend: {be!r}")
