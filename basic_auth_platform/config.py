"""
Runtime configuration for the Basic-Auth user platform
======================================================

Simple settings module that reads from environment variables,
and exposes a stable `settings` object for the rest of the codebase.
Credential-related knobs (realm, bcrypt cost, seed user) live in `auth/config.py`.
Backend selection (BASICAUTH_STORAGE_BACKEND, BASICAUTH_DB_DSN) is read at
call time by `storage/storage_factory.py` so tests can switch it per case.

Startup
-------
- BASICAUTH_DEFER_DATASOURCE_INIT : "true" (default) creates the schema before
  seed rows are inserted; "false" inserts first and creates the schema after.
"""

import os


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class _Settings:
    # -------- Startup ordering --------
    DEFER_DATASOURCE_INIT: bool = _get_bool("BASICAUTH_DEFER_DATASOURCE_INIT", True)


settings = _Settings()
