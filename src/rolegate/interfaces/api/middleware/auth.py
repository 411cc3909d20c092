"""Auth middleware - resolves the caller's identity for the request."""

from dataclasses import dataclass

import falcon.asgi

from rolegate.infrastructure.auth.identity import (
    reset_current_user_id,
    set_current_user_id,
)


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that sets req.context.user and the current identity.

    Identity comes from a Bearer token checked with Keycloak, or from the
    X-User-Id header when trust_user_header is enabled. Unknown callers get
    req.context.user = None.
    """

    def __init__(self, keycloak_provider=None, trust_user_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_user_header = trust_user_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization or X-User-Id header."""
        user = self._resolve(req)
        req.context.user = user
        req.context.identity_token = set_current_user_id(user.user_id if user else None)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        token = getattr(req.context, "identity_token", None)
        if token is not None:
            reset_current_user_id(token)

    def _resolve(self, req: falcon.asgi.Request) -> RequestUser | None:
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._keycloak:
            user = self._keycloak.decode_token(auth[7:])
            if user:
                return RequestUser(
                    user_id=user.user_id,
                    email=user.email,
                    username=user.username,
                )
            return None
        if self._trust_user_header:
            user_id = req.get_header("X-User-Id")
            if user_id:
                return RequestUser(user_id=user_id)
        return None
