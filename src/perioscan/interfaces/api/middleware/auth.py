"""Auth middleware - extracts user from bearer token or marks request anonymous."""

from dataclasses import dataclass

import falcon.asgi

from perioscan.domain.entities import Signer


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    role: str
    name: str | None = None
    email: str | None = None

    def as_signer(self) -> Signer:
        return Signer(
            id=self.user_id,
            name=self.name or "",
            email=self.email or "",
            role=self.role,
        )


class AuthMiddleware:
    """Middleware that validates bearer tokens and sets req.context.user.

    Missing or invalid tokens leave req.context.user as None; resources
    decide whether anonymous access is allowed.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        user = self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = RequestUser(
                user_id=user.user_id,
                role=user.role,
                name=user.name,
                email=user.email,
            )
