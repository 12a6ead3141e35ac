from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd

from lavatables.exceptions import InvalidCellDefinition, InvalidDateTimeString

DateInstant = datetime | date | pd.Timestamp


def is_null(value: Any) -> bool:
    """None plus the pandas missing markers (NaN, NaT, pd.NA)."""
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def is_date_instant(value: Any) -> bool:
    # NaT subclasses datetime.
    if is_null(value):
        return False
    return isinstance(value, (datetime, date))


def to_timestamp(value: DateInstant, timezone: str | None = None) -> pd.Timestamp:
    """Normalize a date instant to a Timestamp, aligned to ``timezone`` when given."""
    stamp = pd.Timestamp(value)
    if timezone is None:
        return stamp
    if stamp.tzinfo is None:
        return stamp.tz_localize(timezone, nonexistent="shift_forward", ambiguous="NaT")
    return stamp.tz_convert(timezone)


def _plain(value: Any) -> Any:
    # numpy scalars are not JSON serializable.
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass(frozen=True)
class Cell:
    """A single DataTable value, with optional display string and properties."""

    value: Any = None
    formatted_value: str | None = None
    properties: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.properties is not None:
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any] | Sequence[Any]) -> Cell:
        """Build a cell from ``{"v", "f", "p"}`` or ``[v, f, p]``."""
        if isinstance(definition, Mapping):
            value = definition.get("v")
            formatted = definition.get("f")
            properties = definition.get("p")
        else:
            if len(definition) > 3:
                raise InvalidCellDefinition(definition)
            padded = list(definition) + [None] * (3 - len(definition))
            value, formatted, properties = padded[:3]

        if is_date_instant(value):
            return DateCell(
                to_timestamp(value),
                formatted_value=formatted,
                properties=properties,
            )
        if is_null(value):
            return NullCell(formatted_value=formatted, properties=properties)
        return cls(value, formatted_value=formatted, properties=properties)

    def serialized_value(self) -> Any:
        return _plain(self.value)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"v": self.serialized_value()}
        if self.formatted_value is not None:
            payload["f"] = self.formatted_value
        if self.properties:
            payload["p"] = dict(self.properties)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), allow_nan=False)


@dataclass(frozen=True)
class NullCell(Cell):
    value: None = field(default=None, init=False)


@dataclass(frozen=True)
class DateCell(Cell):
    value: pd.Timestamp

    def __post_init__(self) -> None:
        Cell.__post_init__(self)
        object.__setattr__(self, "value", pd.Timestamp(self.value))

    @classmethod
    def parse_string(
        cls,
        text: str,
        fmt: str | None = None,
        timezone: str | None = None,
    ) -> DateCell:
        """Parse ``text`` with a strptime ``fmt``, or free-form when no format is set."""
        try:
            if fmt:
                parsed = pd.to_datetime(text.strip(), format=fmt)
            else:
                parsed = pd.Timestamp(text.strip())
        except (ValueError, TypeError, OverflowError) as exc:
            raise InvalidDateTimeString(text, fmt) from exc
        if pd.isna(parsed):
            raise InvalidDateTimeString(text, fmt)
        stamp = to_timestamp(parsed, timezone)
        # Ambiguous wall-clock times localize to NaT.
        if pd.isna(stamp):
            raise InvalidDateTimeString(text, fmt)
        return cls(stamp)

    def serialized_value(self) -> str:
        # JavaScript Date months are zero-based.
        stamp = self.value
        return (
            f"Date({stamp.year},{stamp.month - 1},{stamp.day},"
            f"{stamp.hour},{stamp.minute},{stamp.second})"
        )


def create_cell(raw_value: Any) -> Cell:
    """Wrap a raw row value in the matching Cell variant."""
    if isinstance(raw_value, Cell):
        return raw_value
    if is_null(raw_value):
        return NullCell()
    if is_date_instant(raw_value):
        return DateCell(to_timestamp(raw_value))
    return Cell(raw_value)
