"""Navigation menu entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """Menu entry - only module is interpreted, the rest is passed through."""

    module: str
    path: str
    label: str
    icon: str = ""

    def to_dict(self) -> dict:
        return {
            "module": self.module,
            "path": self.path,
            "label": self.label,
            "icon": self.icon,
        }
