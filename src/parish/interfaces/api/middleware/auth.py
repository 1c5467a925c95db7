"""Auth middleware - resolves the request user and role claim."""

from dataclasses import dataclass

import falcon.asgi

from parish.application.ports import IdentityProvider


@dataclass
class RequestUser:
    """User from request context. role is the raw claim, None when anonymous."""

    user_id: str
    role: str | None = None
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates bearer tokens and sets req.context.user.

    Requests without a token get an anonymous user with no role. Requests
    with a token that cannot be validated get no user at all.
    """

    def __init__(self, identity_provider: IdentityProvider | None = None) -> None:
        self._identity = identity_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth[7:]
            if self._identity:
                identity = self._identity.decode_token(token)
                if identity:
                    req.context.user = RequestUser(
                        user_id=identity.user_id,
                        role=identity.role,
                        email=identity.email,
                        username=identity.username,
                    )
                    return
            req.context.user = None
        else:
            req.context.user = RequestUser(user_id="anonymous")
