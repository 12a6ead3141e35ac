from __future__ import annotations

import logging
import threading
from typing import Any

from lavatables.exceptions import ChartNotFound, DashboardNotFound, InvalidRenderable
from lavatables.renderables import (
    DASHBOARD_TYPE,
    Chart,
    Dashboard,
    Renderable,
    is_valid_label,
    validate_label,
)

LOGGER = logging.getLogger(__name__)


class Volcano:
    """In-memory store for every Chart and Dashboard of a session.

    Charts are keyed by ``(type, label)`` and dashboards by ``label``; the two
    namespaces never collide. Storing an existing key replaces the entry.
    """

    def __init__(self) -> None:
        self._charts: dict[str, dict[str, Chart]] = {}
        self._dashboards: dict[str, Dashboard] = {}
        self._lock = threading.RLock()

    def store(self, renderable: Renderable) -> Renderable:
        kind = getattr(renderable, "kind", None)
        if kind == "chart" and isinstance(renderable, Chart):
            return self._store_chart(renderable)
        if kind == "dashboard" and isinstance(renderable, Dashboard):
            return self._store_dashboard(renderable)
        raise InvalidRenderable(renderable)

    def get(self, type: str, label: str) -> Renderable:
        validate_label(label)
        if type == DASHBOARD_TYPE:
            return self._get_dashboard(label)
        return self._get_chart(type, label)

    def get_all(self) -> list[Renderable]:
        with self._lock:
            charts: list[Renderable] = [
                chart
                for charts_by_label in self._charts.values()
                for chart in charts_by_label.values()
            ]
            return charts + list(self._dashboards.values())

    def check_chart(self, type: Any, label: Any) -> bool:
        if not is_valid_label(type) or not is_valid_label(label):
            return False
        with self._lock:
            return label in self._charts.get(type, {})

    def check_dashboard(self, label: Any) -> bool:
        if not is_valid_label(label):
            return False
        with self._lock:
            return label in self._dashboards

    def __len__(self) -> int:
        with self._lock:
            return sum(len(charts) for charts in self._charts.values()) + len(self._dashboards)

    def _store_chart(self, chart: Chart) -> Chart:
        with self._lock:
            charts_by_label = self._charts.setdefault(chart.type, {})
            if chart.label in charts_by_label:
                LOGGER.info("Replacing stored %s('%s')", chart.type, chart.label)
            charts_by_label[chart.label] = chart
        LOGGER.debug("Stored %s('%s')", chart.type, chart.label)
        return chart

    def _store_dashboard(self, dashboard: Dashboard) -> Dashboard:
        with self._lock:
            if dashboard.label in self._dashboards:
                LOGGER.info("Replacing stored Dashboard('%s')", dashboard.label)
            self._dashboards[dashboard.label] = dashboard
        LOGGER.debug("Stored Dashboard('%s')", dashboard.label)
        return dashboard

    def _get_chart(self, type: str, label: str) -> Chart:
        with self._lock:
            if not self.check_chart(type, label):
                raise ChartNotFound(type, label)
            return self._charts[type][label]

    def _get_dashboard(self, label: str) -> Dashboard:
        with self._lock:
            if not self.check_dashboard(label):
                raise DashboardNotFound(label)
            return self._dashboards[label]
