"""Role registry - static role to module mapping."""

from collections.abc import Iterable
from types import MappingProxyType

from parish.domain.entities import ModulePermission
from parish.domain.value_objects import Module, Role

DEFAULT_REGISTRY_VERSION = "2024.1"

MODULE_CATALOG: frozenset[str] = frozenset(m.value for m in Module)

_STAFF_COMMON = (Module.DASHBOARD, Module.NOTIFICATIONS, Module.SETTINGS)

DEFAULT_ROLE_PERMISSIONS: tuple[ModulePermission, ...] = (
    ModulePermission(
        role=Role.ADMIN,
        name="Administrator",
        description="Full access to all features",
        wildcard=True,
    ),
    ModulePermission(
        role=Role.EVENTS_MANAGER,
        name="Events Manager",
        description="Manage events and view dashboard",
        modules=frozenset((*_STAFF_COMMON, Module.EVENTS)),
    ),
    ModulePermission(
        role=Role.FINANCE_MANAGER,
        name="Finance Manager",
        description="Manage donations and financial reports",
        modules=frozenset((*_STAFF_COMMON, Module.DONATIONS)),
    ),
    ModulePermission(
        role=Role.RESOURCE_MANAGER,
        name="Resource Manager",
        description="Manage articles, resources, and educational content",
        modules=frozenset((*_STAFF_COMMON, Module.RESOURCES)),
    ),
    ModulePermission(
        role=Role.CONTENT_MANAGER,
        name="Content Manager",
        description="Manage testimonials and public content",
        modules=frozenset((*_STAFF_COMMON, Module.TESTIMONIALS)),
    ),
    ModulePermission(
        role=Role.MEMBER,
        name="Member",
        description="Member portal: donations, giving history and events",
        modules=frozenset(
            (
                Module.PORTAL_DASHBOARD,
                Module.PORTAL_DONATE,
                Module.PORTAL_DONATION_HISTORY,
                Module.PORTAL_EVENTS,
            )
        ),
    ),
)


class RoleRegistry:
    """Immutable, versioned role to module mapping.

    Lookups accept a Role or a raw claim string. Unknown roles resolve to no
    access and never raise.
    """

    def __init__(
        self,
        permissions: Iterable[ModulePermission],
        version: str = DEFAULT_REGISTRY_VERSION,
    ) -> None:
        by_role: dict[Role, ModulePermission] = {}
        for perm in permissions:
            if perm.role is Role.UNKNOWN:
                raise ValueError("Unknown role cannot carry permissions")
            if perm.role in by_role:
                raise ValueError(f"Duplicate permission entry for role: {perm.role}")
            by_role[perm.role] = ModulePermission(
                role=perm.role,
                name=perm.name,
                description=perm.description,
                modules=frozenset(str(m) for m in perm.modules),
                wildcard=perm.wildcard,
            )
        self._by_role = MappingProxyType(by_role)
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def get(self, role: Role | str | None) -> ModulePermission | None:
        """Permission entry for role, None when unrecognized."""
        return self._by_role.get(Role.from_claim(role))

    def is_wildcard(self, role: Role | str | None) -> bool:
        perm = self.get(role)
        return bool(perm and perm.wildcard)

    def modules_for(self, role: Role | str | None) -> frozenset[str]:
        """Modules the role may open. Wildcard roles get the whole catalog."""
        perm = self.get(role)
        if perm is None:
            return frozenset()
        if perm.wildcard:
            return MODULE_CATALOG | perm.modules
        return perm.modules

    def has_access(self, role: Role | str | None, module: Module | str | None) -> bool:
        """True iff role is wildcard or module is in its set."""
        if not module:
            return False
        perm = self.get(role)
        if perm is None:
            return False
        if perm.wildcard:
            return True
        return str(module) in perm.modules

    def display_name(self, role: Role | str | None) -> str:
        perm = self.get(role)
        if perm:
            return perm.name
        return "" if role is None else str(role).strip()

    def description(self, role: Role | str | None) -> str:
        perm = self.get(role)
        return perm.description if perm else ""

    def roles(self) -> list[Role]:
        return list(self._by_role)

    def options(self) -> list[dict]:
        """Role options for dropdowns."""
        return [
            {"value": perm.role.value, "label": perm.name, "description": perm.description}
            for perm in self._by_role.values()
        ]


def build_default_registry() -> RoleRegistry:
    """Registry with the built-in role matrix."""
    return RoleRegistry(DEFAULT_ROLE_PERMISSIONS, version=DEFAULT_REGISTRY_VERSION)
