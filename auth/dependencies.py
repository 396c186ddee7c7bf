"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to read the user the
middleware authenticated. The header is parsed once, in BasicAuthMiddleware.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic

from basic_auth_platform.models.user import User
from .config import REALM


class BasicSchemeDoc(HTTPBasic):
    """Advertises HTTP Basic in the OpenAPI schema without reading the header."""

    async def __call__(self, request: Request) -> None:
        return None


security = BasicSchemeDoc(realm=REALM, auto_error=False)


def get_current_user(request: Request, _scheme: None = Depends(security)) -> User:
    """
    Dependency that returns the authenticated user.

    Raises:
        HTTPException: 401 if the request carries no authenticated user.
    """
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )
    return user
