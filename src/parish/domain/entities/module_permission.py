"""Module permission entity - what a role may open."""

from dataclasses import dataclass, field

from parish.domain.value_objects import Role


@dataclass(frozen=True)
class ModulePermission:
    """Role with display metadata and its module set. Wildcard grants every module."""

    role: Role
    name: str
    description: str
    modules: frozenset[str] = field(default_factory=frozenset)
    wildcard: bool = False
