"""Keycloak OIDC provider for token validation and role claims."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from parish.application.ports import Identity

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts the role claim."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        role_claim: str = "role",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._role_claim = role_claim

    def decode_token(self, token: str) -> Identity | None:
        """Validate token, return identity or None when inactive or rejected."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        role = token_info.get(self._role_claim)
        return Identity(
            user_id=token_info.get("sub", ""),
            role=role if isinstance(role, str) else None,
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
