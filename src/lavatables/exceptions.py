from __future__ import annotations

from typing import Any


class LavaTablesError(Exception):
    """Base class for every error raised by lavatables."""


class InvalidRowDefinition(LavaTablesError, TypeError):
    def __init__(self, values: Any) -> None:
        super().__init__(
            f"Row values must be a list/tuple or None, got {type(values).__name__}."
        )
        self.values = values


class InvalidCellCount(LavaTablesError, ValueError):
    def __init__(self, cell_count: int, column_count: int) -> None:
        super().__init__(
            f"Row has {cell_count} cells but the DataTable only has {column_count} columns."
        )
        self.cell_count = cell_count
        self.column_count = column_count


class InvalidDate(LavaTablesError, ValueError):
    def __init__(self, value: Any, message: str | None = None) -> None:
        super().__init__(
            message
            or (
                "Date columns accept a datetime, a non-empty date string, or None, "
                f"got {value!r}."
            )
        )
        self.value = value


class InvalidDateTimeString(InvalidDate):
    def __init__(self, value: str, fmt: str | None = None) -> None:
        detail = f" with format {fmt!r}" if fmt else ""
        super().__init__(value, f"Unable to parse {value!r} as a date{detail}.")
        self.format = fmt


class InvalidColumnIndex(LavaTablesError, IndexError):
    def __init__(self, index: Any, size: int) -> None:
        super().__init__(f"Invalid index {index!r}; expected an int in range(0, {size}).")
        self.index = index
        self.size = size


class InvalidRowIndex(LavaTablesError, IndexError):
    def __init__(self, index: Any, row_count: int) -> None:
        super().__init__(
            f"Invalid row index {index!r}; the DataTable has {row_count} rows."
        )
        self.index = index
        self.row_count = row_count


class InvalidCellDefinition(LavaTablesError, ValueError):
    def __init__(self, definition: Any) -> None:
        super().__init__(
            f"Cell definitions take at most [value, formatted, properties], got {definition!r}."
        )
        self.definition = definition


class InvalidColumnDefinition(LavaTablesError, ValueError):
    pass


class InvalidColumnType(LavaTablesError, ValueError):
    def __init__(self, column_type: Any, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported column type {column_type!r}; expected one of {', '.join(allowed)}."
        )
        self.column_type = column_type


class InvalidColumnRole(LavaTablesError, ValueError):
    def __init__(self, role: Any, allowed: tuple[str, ...]) -> None:
        super().__init__(f"Unsupported column role {role!r}; expected one of {', '.join(allowed)}.")
        self.role = role


class InvalidLabel(LavaTablesError, ValueError):
    def __init__(self, label: Any, field_name: str = "label") -> None:
        super().__init__(f"{field_name} must be a non-empty string, got {label!r}.")
        self.label = label


class InvalidRenderable(LavaTablesError, TypeError):
    def __init__(self, renderable: Any) -> None:
        super().__init__(
            f"Only Chart and Dashboard objects can be stored, got {type(renderable).__name__}."
        )


class ChartNotFound(LavaTablesError, LookupError):
    def __init__(self, chart_type: str, label: str) -> None:
        super().__init__(f"{chart_type}('{label}') was not found.")
        self.chart_type = chart_type
        self.label = label


class DashboardNotFound(LavaTablesError, LookupError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Dashboard('{label}') was not found.")
        self.label = label
