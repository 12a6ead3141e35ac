from __future__ import annotations

from typing import Any

from lavatables.config import AppConfig
from lavatables.datatables.datatable import DataTable
from lavatables.renderables import DASHBOARD_TYPE, Chart, Dashboard, Renderable
from lavatables.volcano import Volcano


class LavaSession:
    """Entry point that owns one Volcano and builds tables with configured defaults."""

    def __init__(self, config: AppConfig | None = None, volcano: Volcano | None = None) -> None:
        self.config = config if config is not None else AppConfig()
        self.volcano = volcano if volcano is not None else Volcano()

    def datatable(self, **options: Any) -> DataTable:
        defaults = self.config.datatable.model_dump()
        defaults.update({key: value for key, value in options.items() if value is not None})
        return DataTable(defaults)

    def chart(
        self,
        chart_type: str,
        label: str,
        datatable: DataTable | None = None,
        **options: Any,
    ) -> Chart:
        chart = Chart(chart_type, label, datatable=datatable, options=options)
        self.volcano.store(chart)
        return chart

    def dashboard(self, label: str, datatable: DataTable | None = None) -> Dashboard:
        dashboard = Dashboard(label, datatable=datatable)
        self.volcano.store(dashboard)
        return dashboard

    def store(self, renderable: Renderable) -> Renderable:
        return self.volcano.store(renderable)

    def exists(self, type: str, label: str) -> bool:
        if type == DASHBOARD_TYPE:
            return self.volcano.check_dashboard(label)
        return self.volcano.check_chart(type, label)

    def fetch(self, type: str, label: str) -> Renderable:
        return self.volcano.get(type, label)

    def renderables(self) -> list[Renderable]:
        return self.volcano.get_all()
