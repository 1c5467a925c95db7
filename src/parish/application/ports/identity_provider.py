"""Identity provider port - token to user and role claim."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Identity:
    """Authenticated user with the raw role claim."""

    user_id: str
    role: str | None = None
    email: str | None = None
    username: str | None = None


class IdentityProvider(Protocol):
    """Port for validating tokens issued by the identity provider."""

    def decode_token(self, token: str) -> Identity | None: ...
