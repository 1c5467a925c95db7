"""Domain value objects."""

from parish.domain.value_objects.module import Module
from parish.domain.value_objects.recurrence_pattern import RecurrencePattern
from parish.domain.value_objects.role import Role

__all__ = [
    "Module",
    "RecurrencePattern",
    "Role",
]
