from lavatables.datatables.cells import Cell, DateCell, NullCell, create_cell
from lavatables.datatables.columns import COLUMN_ROLES, COLUMN_TYPES, Column
from lavatables.datatables.datatable import DataTable
from lavatables.datatables.frames import datatable_from_frame
from lavatables.datatables.rows import NullRow, Row

__all__ = [
    "COLUMN_ROLES",
    "COLUMN_TYPES",
    "Cell",
    "Column",
    "DataTable",
    "DateCell",
    "NullCell",
    "NullRow",
    "Row",
    "create_cell",
    "datatable_from_frame",
]
