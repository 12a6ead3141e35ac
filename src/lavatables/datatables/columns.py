from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

from lavatables.exceptions import InvalidColumnRole, InvalidColumnType

ColumnType = Literal["string", "number", "boolean", "date", "datetime", "timeofday"]

COLUMN_TYPES: tuple[str, ...] = ("string", "number", "boolean", "date", "datetime", "timeofday")
COLUMN_ROLES: tuple[str, ...] = (
    "annotation",
    "annotationText",
    "certainty",
    "emphasis",
    "interval",
    "scope",
    "style",
    "tooltip",
    "domain",
    "data",
)

DATE_TYPE_PATTERN = re.compile(r"date|datetime|timeofday")


def is_date_type(column_type: str) -> bool:
    return DATE_TYPE_PATTERN.fullmatch(column_type) is not None


@dataclass(frozen=True)
class Column:
    type: str
    label: str = ""
    id: str | None = None
    role: str | None = None

    def __post_init__(self) -> None:
        if self.type not in COLUMN_TYPES:
            raise InvalidColumnType(self.type, COLUMN_TYPES)
        if self.role is not None and self.role not in COLUMN_ROLES:
            raise InvalidColumnRole(self.role, COLUMN_ROLES)
        object.__setattr__(self, "label", str(self.label or ""))

    @property
    def is_date(self) -> bool:
        return is_date_type(self.type)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type, "label": self.label}
        if self.id:
            payload["id"] = self.id
        if self.role:
            payload["role"] = self.role
        return payload
