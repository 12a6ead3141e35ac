from __future__ import annotations

import json
from datetime import datetime

import pandas as pd
import pytest

from lavatables.datatables.cells import Cell, DateCell, NullCell
from lavatables.datatables.datatable import DataTable
from lavatables.datatables.rows import NullRow, Row
from lavatables.exceptions import (
    InvalidCellCount,
    InvalidColumnIndex,
    InvalidDate,
    InvalidDateTimeString,
    InvalidRowDefinition,
)


def _table(*column_types: str, **options: str) -> DataTable:
    datatable = DataTable(options)
    for column_type in column_types:
        datatable.add_column(column_type)
    return datatable


def test_row_constructor_wraps_values_without_column_types() -> None:
    row = Row(["a", None, datetime(2024, 1, 15), Cell(1)])

    assert [type(cell) for cell in row] == [Cell, NullCell, DateCell, Cell]


@pytest.mark.parametrize("values", [None, [], ()])
def test_create_returns_null_row_for_missing_values(values) -> None:
    row = Row.create(_table("string", "number", "date"), values)

    assert isinstance(row, NullRow)
    assert len(row) == 3
    assert all(isinstance(cell, NullCell) for cell in row)


@pytest.mark.parametrize("values", ["abc", 5, {"a": 1}, b"raw"])
def test_create_rejects_non_sequence_values(values) -> None:
    with pytest.raises(InvalidRowDefinition):
        Row.create(_table("string"), values)


def test_create_rejects_more_values_than_columns() -> None:
    with pytest.raises(InvalidCellCount, match="3 cells but the DataTable only has 2 columns"):
        Row.create(_table("string", "number"), ["a", 1, 2])


def test_create_pads_short_rows_with_null_cells() -> None:
    row = Row.create(_table("string", "number", "number"), ["a"])

    assert len(row) == 3
    assert isinstance(row.get_cell(1), NullCell)
    assert isinstance(row.get_cell(2), NullCell)


def test_create_builds_date_cells_from_instants_and_strings() -> None:
    row = Row.create(
        _table("date", "datetime", "timeofday", "date"),
        [datetime(2024, 1, 15), "2024-01-15 10:00:00", "08:15:00", None],
    )

    cells = list(row)
    assert all(isinstance(cell, DateCell) for cell in cells[:3])
    assert isinstance(cells[3], NullCell)
    assert cells[1].value.hour == 10


@pytest.mark.parametrize("value", ["", "   ", 20240115, 1.5, True, {"v": "2024-01-15"}])
def test_create_rejects_non_date_values_in_date_columns(value) -> None:
    with pytest.raises(InvalidDate):
        Row.create(_table("string", "date"), ["x", value])


def test_create_uses_table_datetime_format() -> None:
    datatable = _table("date", datetime_format="%m/%d/%Y")

    row = Row.create(datatable, ["01/15/2024"])
    assert row.get_cell(0).to_dict() == {"v": "Date(2024,0,15,0,0,0)"}

    with pytest.raises(InvalidDateTimeString):
        Row.create(datatable, ["2024-01-15"])


def test_create_builds_structured_cells_outside_date_columns() -> None:
    row = Row.create(_table("number", "string"), [{"v": 1000, "f": "$1,000"}, ["x", "X"]])

    assert row.to_dict() == {"c": [{"v": 1000, "f": "$1,000"}, {"v": "x", "f": "X"}]}


def test_get_cell_validates_index() -> None:
    row = Row(["a", "b", "c"])

    for index in (0, 1, 2):
        assert row.get_cell(index).value == "abc"[index]
    for index in (3, -1, "a", True, 1.0):
        with pytest.raises(InvalidColumnIndex):
            row.get_cell(index)


def test_indexed_container_operations() -> None:
    row = Row(["a", "b"])

    assert row.contains(1)
    assert not row.contains(2)
    assert row.get(5) is None

    row.set(0, 42)
    assert row.get(0) == Cell(42)

    row.remove(1)
    assert len(row) == 2
    assert isinstance(row.get(1), NullCell)

    with pytest.raises(InvalidColumnIndex):
        row.set(2, "overflow")


def test_iteration_is_restartable() -> None:
    row = Row([1, 2, 3])

    assert [cell.value for cell in row] == [1, 2, 3]
    assert [cell.value for cell in row] == [1, 2, 3]


def test_row_serializes_to_cell_list() -> None:
    row = Row(["hello", None])

    assert row.to_dict() == {"c": [{"v": "hello"}, {"v": None}]}
    assert row.to_json() == '{"c": [{"v": "hello"}, {"v": null}]}'


def test_create_maps_missing_markers_to_null_cells() -> None:
    row = Row.create(_table("number", "string", "datetime"), [float("nan"), pd.NaT, pd.NaT])

    assert all(isinstance(cell, NullCell) for cell in row)
    assert json.loads(row.to_json()) == {"c": [{"v": None}, {"v": None}, {"v": None}]}
