from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "LAVATABLES_"


class DataTableOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    datetime_format: str | None = None
    timezone: str | None = None

    @field_validator("datetime_format")
    @classmethod
    def _blank_format_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value.strip())
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"invalid timezone: {value}") from exc
        return value.strip()

    def get(self, key: str, default: Any = None) -> Any:
        value = getattr(self, key, None)
        return default if value is None else value


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    datatable: DataTableOptions = Field(default_factory=DataTableOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    datatable = dict(data.get("datatable") or {})
    for key in ("datetime_format", "timezone"):
        if not datatable.get(key):
            env_value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if env_value:
                datatable[key] = env_value
    logging_section = dict(data.get("logging") or {})
    if not logging_section.get("level") and os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        logging_section["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    return {**data, "datatable": datatable, "logging": logging_section}


def load_config(path: Path | None = None) -> AppConfig:
    """Load YAML config; a missing path yields defaults plus env overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise ValueError("config file must contain a mapping/object")
    return AppConfig.model_validate(_apply_env_overrides(data))
