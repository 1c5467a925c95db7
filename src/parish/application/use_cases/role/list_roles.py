"""List roles use case - options for user management."""

from parish.domain.services import AccessEvaluator
from parish.domain.value_objects import Module, Role


class ListRolesUseCase:
    """Role options for assigning roles to staff accounts."""

    def __init__(self, access_evaluator: AccessEvaluator) -> None:
        self._access = access_evaluator

    def execute(self, role: Role | str | None) -> list[dict]:
        self._access.require(role, Module.USER_MANAGEMENT)
        return self._access.registry.options()
