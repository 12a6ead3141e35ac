from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

from lavatables.datatables.datatable import DataTable
from lavatables.exceptions import InvalidLabel

RenderableKind = Literal["chart", "dashboard"]

DASHBOARD_TYPE = "Dashboard"


def validate_label(value: Any, *, field_name: str = "label") -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidLabel(value, field_name)
    return value


def is_valid_label(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def default_element_id(label: str) -> str:
    slug = re.sub(r"[^0-9A-Za-z_-]+", "-", label.strip()).strip("-")
    return f"lava-{slug or 'renderable'}"


class Renderable:
    """Something the Volcano can store: a labeled Chart or Dashboard.

    ``kind`` is the discriminant the Volcano dispatches on.
    """

    kind: ClassVar[RenderableKind]

    label: str
    datatable: DataTable | None
    element_id: str | None

    def _init_renderable(self) -> None:
        validate_label(self.label)
        if self.element_id is None:
            self.element_id = default_element_id(self.label)

    @property
    def type(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def _datatable_dict(self) -> dict[str, Any] | None:
        return self.datatable.to_dict() if self.datatable is not None else None


@dataclass(eq=False)
class Chart(Renderable):
    chart_type: str
    label: str
    datatable: DataTable | None = None
    options: dict[str, Any] = field(default_factory=dict)
    element_id: str | None = None

    kind: ClassVar[RenderableKind] = "chart"

    def __post_init__(self) -> None:
        validate_label(self.chart_type, field_name="chart type")
        self._init_renderable()
        self.options = dict(self.options)

    @property
    def type(self) -> str:
        return self.chart_type

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.chart_type,
            "label": self.label,
            "elementId": self.element_id,
            "datatable": self._datatable_dict(),
            "options": dict(self.options),
        }


@dataclass(frozen=True)
class ControlWrapper:
    type: str
    element_id: str
    options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_label(self.type, field_name="control type")
        validate_label(self.element_id, field_name="element id")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "elementId": self.element_id, "options": dict(self.options)}


@dataclass(frozen=True)
class Binding:
    controls: tuple[ControlWrapper, ...]
    charts: tuple[Chart, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "controls": [control.to_dict() for control in self.controls],
            "charts": [
                {"type": chart.type, "label": chart.label, "elementId": chart.element_id}
                for chart in self.charts
            ],
        }


@dataclass(eq=False)
class Dashboard(Renderable):
    label: str
    datatable: DataTable | None = None
    element_id: str | None = None
    bindings: list[Binding] = field(default_factory=list)

    kind: ClassVar[RenderableKind] = "dashboard"

    def __post_init__(self) -> None:
        self._init_renderable()

    @property
    def type(self) -> str:
        return DASHBOARD_TYPE

    def bind(
        self,
        controls: ControlWrapper | list[ControlWrapper] | tuple[ControlWrapper, ...],
        charts: Chart | list[Chart] | tuple[Chart, ...],
    ) -> Dashboard:
        control_list = (controls,) if isinstance(controls, ControlWrapper) else tuple(controls)
        chart_list = (charts,) if isinstance(charts, Chart) else tuple(charts)
        if not control_list or not chart_list:
            raise ValueError("a binding needs at least one control and one chart")
        self.bindings.append(Binding(controls=control_list, charts=chart_list))
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": DASHBOARD_TYPE,
            "label": self.label,
            "elementId": self.element_id,
            "datatable": self._datatable_dict(),
            "bindings": [binding.to_dict() for binding in self.bindings],
        }
