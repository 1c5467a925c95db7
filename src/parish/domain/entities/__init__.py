"""Domain entities."""

from parish.domain.entities.event import Event, EventInstance, EventTemplate
from parish.domain.entities.menu_item import MenuItem
from parish.domain.entities.module_permission import ModulePermission

__all__ = [
    "Event",
    "EventInstance",
    "EventTemplate",
    "MenuItem",
    "ModulePermission",
]
