from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import typer
import yaml

from lavatables.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from lavatables.datatables.frames import datatable_from_frame
from lavatables.exceptions import LavaTablesError
from lavatables.logging import configure_logging
from lavatables.session import LavaSession

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _load_app_config(config_path: Path) -> AppConfig:
    if not config_path.is_file():
        # The bundled default is optional; an explicit path must exist.
        if config_path == DEFAULT_CONFIG_PATH:
            return load_config(None)
        raise typer.BadParameter(f"Config file not found: {config_path}")
    return load_config(config_path)


def _parse_column_types(pairs: list[str]) -> dict[str, str]:
    column_types: dict[str, str] = {}
    for pair in pairs:
        name, separator, column_type = pair.partition("=")
        if not separator or not name.strip() or not column_type.strip():
            raise typer.BadParameter(f"Expected COLUMN=TYPE, got {pair!r}.")
        column_types[name.strip()] = column_type.strip()
    return column_types


@app.command()
def datatable(
    csv: Path = typer.Argument(..., exists=True, readable=True, resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, dir_okay=False),
    column_type: list[str] = typer.Option(
        [],
        "--type",
        help="Column type override as COLUMN=TYPE; repeatable.",
    ),
    datetime_format: str | None = typer.Option(
        None, help="strptime pattern for date column strings."
    ),
    pretty: bool = typer.Option(False, help="Indent the JSON output."),
) -> None:
    """Load a CSV and print it as DataTable JSON."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    session = LavaSession(config=cfg)
    overrides = _parse_column_types(column_type)

    # utf-8-sig strips BOM-prefixed headers commonly found in exported CSV files.
    frame = pd.read_csv(csv, encoding="utf-8-sig")
    options = session.datatable(datetime_format=datetime_format).get_options()
    try:
        table = datatable_from_frame(frame, column_types=overrides, options=options)
    except (LavaTablesError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(table.to_json(indent=2 if pretty else None))


@app.command("show-config")
def show_config(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of YAML."),
) -> None:
    """Print the effective configuration after env overrides."""
    cfg = _load_app_config(config)
    payload = cfg.model_dump()
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(yaml.safe_dump(payload, sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
