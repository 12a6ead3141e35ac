from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any

import pandas as pd

from lavatables.datatables.cells import (
    Cell,
    DateCell,
    NullCell,
    create_cell,
    is_date_instant,
    is_null,
    to_timestamp,
)
from lavatables.datatables.columns import is_date_type
from lavatables.exceptions import (
    InvalidCellCount,
    InvalidColumnIndex,
    InvalidDate,
    InvalidRowDefinition,
)

if TYPE_CHECKING:
    from lavatables.datatables.datatable import DataTable


def _is_row_sequence(values: Any) -> bool:
    return isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray))


def _is_cell_definition(value: Any) -> bool:
    return isinstance(value, Mapping) or _is_row_sequence(value)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class Row:
    """An ordered run of cells, one per DataTable column.

    ``Row(values)`` wraps raw values without looking at column types; use
    :meth:`Row.create` to build a row validated against a DataTable.
    """

    def __init__(self, values: Sequence[Any]) -> None:
        self._cells: list[Cell] = [create_cell(value) for value in values]

    @classmethod
    def create(cls, datatable: DataTable, values: Sequence[Any] | None) -> Row:
        column_count = datatable.get_column_count()

        if values is not None and not _is_row_sequence(values):
            raise InvalidRowDefinition(values)
        if values is None or len(values) == 0:
            return NullRow(column_count)

        cell_count = len(values)
        if cell_count > column_count:
            raise InvalidCellCount(cell_count, column_count)

        column_types = datatable.get_column_types()
        options = datatable.get_options()
        datetime_format = options.get("datetime_format")
        timezone = options.get("timezone")

        cells: list[Cell] = []
        for index, value in enumerate(values):
            if is_null(value):
                cells.append(NullCell())
            elif is_date_type(column_types[index]):
                cells.append(_date_cell(value, datetime_format, timezone))
            elif not isinstance(value, Cell) and _is_cell_definition(value):
                cells.append(Cell.from_definition(value))
            else:
                cells.append(create_cell(value))

        cells.extend(NullCell() for _ in range(column_count - cell_count))
        return Row(cells)

    def get_cell(self, index: int) -> Cell:
        if not self.contains(index):
            raise InvalidColumnIndex(index, len(self._cells))
        return self._cells[index]

    def get(self, index: int) -> Cell | None:
        return self._cells[index] if self.contains(index) else None

    def set(self, index: int, value: Any) -> None:
        if not self.contains(index):
            raise InvalidColumnIndex(index, len(self._cells))
        self._cells[index] = create_cell(value)

    def contains(self, index: Any) -> bool:
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._cells)
        )

    def remove(self, index: int) -> None:
        """Clear a cell; the slot stays so the row keeps its width."""
        self.set(index, None)

    def __iter__(self) -> Iterator[Cell]:
        for cell in self._cells:
            yield cell

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[cell.value for cell in self._cells]!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"c": [cell.to_dict() for cell in self._cells]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), allow_nan=False)


class NullRow(Row):
    """A row of ``column_count`` null cells."""

    def __init__(self, column_count: int) -> None:
        super().__init__([NullCell() for _ in range(column_count)])


def _date_cell(value: Any, datetime_format: str | None, timezone: str | None) -> DateCell:
    if is_date_instant(value):
        stamp = to_timestamp(value, timezone)
        if pd.isna(stamp):
            raise InvalidDate(value)
        return DateCell(stamp)
    if not _is_non_empty_string(value):
        raise InvalidDate(value)
    return DateCell.parse_string(value, datetime_format, timezone)
