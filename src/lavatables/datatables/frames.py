from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from lavatables.config import DataTableOptions
from lavatables.datatables.cells import is_null
from lavatables.datatables.datatable import DataTable


def infer_column_type(series: pd.Series) -> str:
    if pd.api.types.is_bool_dtype(series):
        return "boolean"
    if pd.api.types.is_numeric_dtype(series):
        return "number"
    if pd.api.types.is_datetime64_any_dtype(series):
        return "datetime"
    return "string"


def _row_values(record: tuple[Any, ...]) -> list[Any]:
    # NaN/NaT/None all become null cells.
    return [None if is_null(value) else value for value in record]


def datatable_from_frame(
    frame: pd.DataFrame,
    column_types: Mapping[str, str] | None = None,
    options: DataTableOptions | Mapping[str, Any] | None = None,
) -> DataTable:
    """Build a DataTable whose columns follow the frame's column order."""
    overrides = dict(column_types or {})
    unknown = [name for name in overrides if name not in frame.columns]
    if unknown:
        raise ValueError(f"column_types refers to missing columns: {', '.join(unknown)}")

    datatable = DataTable(options)
    for name in frame.columns:
        column_type = overrides.get(name) or infer_column_type(frame[name])
        datatable.add_column(column_type, str(name), str(name))

    for record in frame.itertuples(index=False, name=None):
        datatable.add_row(_row_values(record))
    return datatable
