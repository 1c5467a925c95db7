"""Roles issued by the identity provider."""

from enum import StrEnum


class Role(StrEnum):
    """Permission class of a user. UNKNOWN covers absent or unrecognized claims."""

    ADMIN = "admin"
    EVENTS_MANAGER = "events_manager"
    FINANCE_MANAGER = "finance_manager"
    RESOURCE_MANAGER = "resource_manager"
    CONTENT_MANAGER = "content_manager"
    MEMBER = "member"
    UNKNOWN = "unknown"

    @classmethod
    def from_claim(cls, value: "str | Role | None") -> "Role":
        """Normalize a raw role claim. Trims whitespace, matching is case-sensitive."""
        if isinstance(value, Role):
            return value
        if value is None:
            return cls.UNKNOWN
        normalized = str(value).strip()
        if not normalized or normalized == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN
