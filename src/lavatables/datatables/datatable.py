from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lavatables.config import DataTableOptions
from lavatables.datatables.columns import Column, ColumnType
from lavatables.datatables.rows import Row
from lavatables.exceptions import InvalidColumnDefinition, InvalidColumnIndex, InvalidRowIndex


class DataTable:
    """Typed columns plus rows, serialized in the Google Charts DataTable shape.

    Columns are declared first; once a row is accepted the column set is
    frozen so every row keeps the same width.
    """

    def __init__(self, options: DataTableOptions | Mapping[str, Any] | None = None) -> None:
        if isinstance(options, DataTableOptions):
            self._options = options.model_copy()
        else:
            self._options = DataTableOptions.model_validate(dict(options or {}))
        self._columns: list[Column] = []
        self._rows: list[Row] = []

    # Columns

    def add_column(
        self,
        type: ColumnType | str,
        label: str = "",
        id: str | None = None,
        role: str | None = None,
    ) -> DataTable:
        if self._rows:
            raise InvalidColumnDefinition(
                "Columns cannot be added once the DataTable holds rows."
            )
        self._columns.append(Column(type=type, label=label, id=id, role=role))
        return self

    def add_columns(self, definitions: Iterable[Mapping[str, Any] | Sequence[Any]]) -> DataTable:
        """Add columns from ``{"type", "label", ...}`` mappings or ``(type, label, id, role)``."""
        for definition in definitions:
            if isinstance(definition, Mapping):
                self.add_column(**definition)
            elif isinstance(definition, Sequence) and not isinstance(definition, str):
                self.add_column(*definition)
            else:
                raise InvalidColumnDefinition(
                    f"Column definitions must be mappings or sequences, got {definition!r}."
                )
        return self

    def add_string_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("string", label, id)

    def add_number_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("number", label, id)

    def add_boolean_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("boolean", label, id)

    def add_date_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("date", label, id)

    def add_datetime_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("datetime", label, id)

    def add_timeofday_column(self, label: str = "", id: str | None = None) -> DataTable:
        return self.add_column("timeofday", label, id)

    def add_role_column(
        self,
        type: ColumnType | str,
        role: str,
        label: str = "",
        id: str | None = None,
    ) -> DataTable:
        return self.add_column(type, label, id, role)

    def get_column_count(self) -> int:
        return len(self._columns)

    def get_columns(self) -> list[Column]:
        return list(self._columns)

    def get_column(self, index: int) -> Column:
        if isinstance(index, bool) or not isinstance(index, int) or not (
            0 <= index < len(self._columns)
        ):
            raise InvalidColumnIndex(index, len(self._columns))
        return self._columns[index]

    def get_column_type(self, index: int) -> str:
        return self.get_column(index).type

    def get_column_types(self) -> list[str]:
        return [column.type for column in self._columns]

    def get_column_labels(self) -> list[str]:
        return [column.label for column in self._columns]

    # Options

    def get_options(self) -> DataTableOptions:
        return self._options

    def set_datetime_format(self, datetime_format: str | None) -> DataTable:
        self._options.datetime_format = datetime_format
        return self

    def set_timezone(self, timezone: str | None) -> DataTable:
        self._options.timezone = timezone
        return self

    # Rows

    def add_row(self, values: Sequence[Any] | None = None) -> DataTable:
        if not self._columns:
            raise InvalidColumnDefinition("Columns must be defined before adding rows.")
        self._rows.append(Row.create(self, values))
        return self

    def add_rows(self, rows: Iterable[Sequence[Any] | None]) -> DataTable:
        for values in rows:
            self.add_row(values)
        return self

    def get_rows(self) -> list[Row]:
        return list(self._rows)

    def get_row(self, index: int) -> Row:
        if isinstance(index, bool) or not isinstance(index, int) or not (
            0 <= index < len(self._rows)
        ):
            raise InvalidRowIndex(index, len(self._rows))
        return self._rows[index]

    def get_row_count(self) -> int:
        return len(self._rows)

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            "cols": [column.to_dict() for column in self._columns],
            "rows": [row.to_dict() for row in self._rows],
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, allow_nan=False)

    def __repr__(self) -> str:
        return f"DataTable(columns={self.get_column_types()!r}, rows={len(self._rows)})"
