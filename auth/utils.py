"""
Utility functions for the auth module.

Passwords are SHA-256 pre-hashed before bcrypt. bcrypt only looks at the
first 72 bytes of its input (newer releases refuse longer input outright);
the pre-hash gives it a fixed 44-byte value instead.
"""

from typing import Optional
import base64
import binascii
import functools
import hashlib

import bcrypt
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from .config import BCRYPT_ROUNDS


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte limit."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Return a salted bcrypt hash of the given password (SHA-256 pre-hashed)."""
    salt = bcrypt.gensalt(rounds=rounds or BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False


@functools.lru_cache(maxsize=1)
def dummy_hash() -> str:
    """A throwaway hash verified against when the user does not exist."""
    return hash_password("dummy-password-for-timing")


def parse_basic_credentials(authorization: Optional[str]) -> Optional[HTTPBasicCredentials]:
    """
    Decode an `Authorization: Basic ...` header value.

    Returns None when the header is missing, uses another scheme, is not valid
    base64, or has no ':' separator. The password may itself contain ':'.
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None
    try:
        data = base64.b64decode(param, validate=True).decode("utf-8")
    except (ValueError, UnicodeDecodeError, binascii.Error):
        return None
    username, separator, password = data.partition(":")
    if not separator:
        return None
    return HTTPBasicCredentials(username=username, password=password)
