from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from lavatables.config import load_config


def test_load_config_reads_datatable_and_logging_sections(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "datatable": {"datetime_format": "%m/%d/%Y", "timezone": "America/Los_Angeles"},
                "logging": {"level": "debug"},
            }
        ),
        encoding="utf-8",
    )

    cfg = load_config(config_path)

    assert cfg.datatable.get("datetime_format") == "%m/%d/%Y"
    assert cfg.datatable.timezone == "America/Los_Angeles"
    assert cfg.logging.level == "DEBUG"


def test_load_config_defaults_without_file(monkeypatch) -> None:
    for name in ("LAVATABLES_DATETIME_FORMAT", "LAVATABLES_TIMEZONE", "LAVATABLES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    cfg = load_config()

    assert cfg.datatable.datetime_format is None
    assert cfg.datatable.get("timezone", "UTC") == "UTC"
    assert cfg.logging.level == "INFO"


def test_load_config_uses_env_for_unset_values(monkeypatch, tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump({"datatable": {"datetime_format": "%Y"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("LAVATABLES_DATETIME_FORMAT", "%d/%m/%Y")
    monkeypatch.setenv("LAVATABLES_TIMEZONE", "UTC")
    monkeypatch.setenv("LAVATABLES_LOG_LEVEL", "warning")

    cfg = load_config(config_path)

    assert cfg.datatable.datetime_format == "%Y"
    assert cfg.datatable.timezone == "UTC"
    assert cfg.logging.level == "WARNING"


def test_load_config_rejects_unknown_keys_and_timezones(tmp_path: Path) -> None:
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text(yaml.safe_dump({"render": {"engine": "js"}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(unknown)

    bad_zone = tmp_path / "zone.yaml"
    bad_zone.write_text(
        yaml.safe_dump({"datatable": {"timezone": "Mars/Olympus"}}),
        encoding="utf-8",
    )
    with pytest.raises(ValidationError, match="invalid timezone"):
        load_config(bad_zone)


def test_load_config_rejects_non_mapping_file(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(config_path)


def test_repository_default_config_loads() -> None:
    default_path = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"

    cfg = load_config(default_path)

    assert cfg.logging.level == "INFO"
