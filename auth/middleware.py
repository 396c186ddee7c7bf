"""
HTTP Basic authentication middleware for FastAPI.

Runs on every request, in this order:

1. Authentication: if an `Authorization: Basic` header is present, verify it
   against the user store. Success stores the user on `request.state.user`;
   a missing, malformed or wrong header leaves the request anonymous
   (`request.state.user = None`).
2. Authorization: ask the policy whether the path may be served to this
   user. If not, answer 401 with a `WWW-Authenticate` challenge.

Nothing is kept between requests: no session, no cookie, no token.

Usage:
    app.add_middleware(
        BasicAuthMiddleware,
        user_store=store,
        policy=AuthorizationPolicy(),
        realm="Realm",
    )
"""

from typing import Optional
import logging

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from basic_auth_platform.models.user import User
from basic_auth_platform.storage.base import BaseUserStore
from .policy import AuthorizationPolicy
from .service import BadCredentialsError, authenticate_user
from .utils import parse_basic_credentials

log = logging.getLogger("basicauth.auth")


class BasicAuthMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        user_store: BaseUserStore,
        policy: Optional[AuthorizationPolicy] = None,
        realm: str = "Realm",
    ):
        super().__init__(app)
        self.user_store = user_store
        self.policy = policy or AuthorizationPolicy()
        self.realm = realm

    def _authenticate(self, authorization: Optional[str]) -> Optional[User]:
        credentials = parse_basic_credentials(authorization)
        if credentials is None:
            return None
        try:
            return authenticate_user(self.user_store, credentials.username, credentials.password)
        except BadCredentialsError:
            log.debug("Bad credentials for user %r", credentials.username)
            return None

    def unauthorized(self) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"detail": "Unauthorized"},
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        authorization = request.headers.get("authorization")

        # Lookup and bcrypt are blocking; keep them off the event loop.
        user = await run_in_threadpool(self._authenticate, authorization) if authorization else None
        request.state.user = user

        if not self.policy.is_permitted(path, user):
            log.warning("Unauthorized access attempt: %s", path)
            return self.unauthorized()

        if user is None:
            log.debug("Anonymous access: %s", path)
        return await call_next(request)
