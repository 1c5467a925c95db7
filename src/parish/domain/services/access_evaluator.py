"""Access evaluator - navigation decisions and menu filtering."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from parish.domain.exceptions import PermissionDenied
from parish.domain.services.role_registry import RoleRegistry
from parish.domain.value_objects import Module, Role

T = TypeVar("T")


@dataclass(frozen=True)
class AccessDecision:
    """Allow, or deny with a displayable reason."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "AccessDecision":
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed


def _module_of(item: object) -> str | None:
    if isinstance(item, Mapping):
        return item.get("module")
    return getattr(item, "module", None)


class AccessEvaluator:
    """Gates navigation attempts against a RoleRegistry. Denies by default."""

    def __init__(self, registry: RoleRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> RoleRegistry:
        return self._registry

    def can_navigate(
        self, current_role: Role | str | None, target_module: Module | str | None
    ) -> AccessDecision:
        """Decide whether current_role may open target_module."""
        raw = "" if current_role is None else str(current_role).strip()
        if not raw:
            return AccessDecision.deny("Authentication required")

        role = Role.from_claim(current_role)
        if role is Role.UNKNOWN:
            return AccessDecision.deny(f"Unrecognized role: {raw}")

        if not target_module:
            return AccessDecision.deny("No module requested")

        if self._registry.has_access(role, target_module):
            return AccessDecision.allow()
        name = self._registry.display_name(role)
        return AccessDecision.deny(f"{name} does not have access to {target_module}")

    def require(
        self, current_role: Role | str | None, target_module: Module | str
    ) -> None:
        """Raise PermissionDenied unless current_role may open target_module."""
        decision = self.can_navigate(current_role, target_module)
        if not decision.allowed:
            raise PermissionDenied(decision.reason)

    def filter_menu(self, role: Role | str | None, items: Iterable[T]) -> list[T]:
        """Keep accessible items in their original order."""
        normalized = Role.from_claim(role)
        return [
            item
            for item in items
            if self._registry.has_access(normalized, _module_of(item))
        ]
