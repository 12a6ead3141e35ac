from importlib.metadata import PackageNotFoundError, version

from lavatables.config import AppConfig, DataTableOptions, load_config
from lavatables.datatables import Cell, Column, DataTable, DateCell, NullCell, NullRow, Row
from lavatables.renderables import Chart, ControlWrapper, Dashboard, Renderable
from lavatables.session import LavaSession
from lavatables.volcano import Volcano

try:
    __version__ = version("lavatables")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "AppConfig",
    "Cell",
    "Chart",
    "Column",
    "ControlWrapper",
    "Dashboard",
    "DataTable",
    "DataTableOptions",
    "DateCell",
    "LavaSession",
    "NullCell",
    "NullRow",
    "Renderable",
    "Row",
    "Volcano",
    "__version__",
    "load_config",
]
