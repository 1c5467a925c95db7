"""Domain services - pure authorization and scheduling logic."""

from parish.domain.services.access_evaluator import AccessDecision, AccessEvaluator
from parish.domain.services.recurrence_expander import RecurrenceExpander
from parish.domain.services.role_registry import (
    DEFAULT_ROLE_PERMISSIONS,
    MODULE_CATALOG,
    RoleRegistry,
    build_default_registry,
)

__all__ = [
    "DEFAULT_ROLE_PERMISSIONS",
    "MODULE_CATALOG",
    "AccessDecision",
    "AccessEvaluator",
    "RecurrenceExpander",
    "RoleRegistry",
    "build_default_registry",
]
