"""
User group and chart type schemas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from census_dashboard.config import USER_GROUPS, DEFAULT_GROUP


class ChartType(str, Enum):
    BAR = "bar"
    PIE = "pie"


@dataclass(frozen=True)
class UserGroup:
    """An audience of the dashboard and the datasets relevant to it."""
    name: str
    datasets: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def default_dataset(self) -> Optional[str]:
        return self.datasets[0] if self.datasets else None

    def to_dict(self, catalog=None) -> dict:
        datasets = [
            {"code": code, "name": catalog.display_name(code) if catalog is not None else code}
            for code in self.datasets
        ]
        return {"name": self.name, "description": self.description, "datasets": datasets}


def load_user_groups(groups: list[dict] = USER_GROUPS) -> list[UserGroup]:
    return [
        UserGroup(name=g["name"], datasets=tuple(g["datasets"]), description=g.get("description", ""))
        for g in groups
    ]


def find_group(name: str | None, groups: list[UserGroup] | None = None) -> UserGroup | None:
    """Look up a group by name; None/empty selects the default group."""
    if groups is None:
        groups = load_user_groups()
    wanted = name or DEFAULT_GROUP
    return next((g for g in groups if g.name == wanted), None)
