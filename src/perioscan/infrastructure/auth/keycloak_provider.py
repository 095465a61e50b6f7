"""Keycloak OIDC provider for JWT validation."""

from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from perioscan.domain.value_objects import UserRole
from perioscan.logging import get_logger

logger = get_logger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    name: str | None
    realm_roles: list[str]

    @property
    def role(self) -> str:
        """Highest-privilege known realm role; assistente when none match."""
        for role in UserRole:
            if role.value in self.realm_roles:
                return role.value
        return UserRole.ASSISTENTE.value


class KeycloakProvider:
    """Keycloak OIDC - validates access tokens and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive/invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("token_introspection_failed", error=str(e))
            return None
        return user_from_token_info(token_info)


def user_from_token_info(token_info: dict) -> OIDCUser | None:
    """Map an introspection response to OIDCUser."""
    if not token_info.get("active"):
        return None
    return OIDCUser(
        user_id=token_info.get("sub", ""),
        email=token_info.get("email"),
        name=token_info.get("name") or token_info.get("preferred_username"),
        realm_roles=token_info.get("realm_access", {}).get("roles", []),
    )
