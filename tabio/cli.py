"""CLI entry point using Click."""

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tabio import __version__
from tabio.models.config import Config, ImportOptions
from tabio.models.record import FileInput
from tabio.utils.errors import ConfigError, TabioError
from tabio.utils.logging import setup_logging
from tabio.xlsx.reader import import_from_input
from tabio.xlsx.writer import export_tabular


console = Console()
err_console = Console(stderr=True)


def load_records(input_path: Path) -> list[dict[str, Any]]:
    """
    Load a list of records from a JSON or YAML file.

    Raises:
        ConfigError: If the file is not a list of objects
    """
    try:
        with open(input_path, encoding="utf-8") as f:
            if input_path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot parse {input_path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ConfigError(f"{input_path} must contain a list of objects")

    return data


def render_table(records: list[dict[str, Any]]) -> Table:
    """Render records as a rich table, one column per key."""
    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    table = Table(show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column)
    for record in records:
        table.add_row(*("" if record.get(c) is None else str(record.get(c)) for c in columns))

    return table


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Log level (default: TABIO_LOG_LEVEL or INFO)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_file: Path | None):
    """
    tabio - spreadsheet import/export for record lists.

    Export JSON/YAML records to an XLSX sheet, or read a sheet's rows
    back as records keyed by the header row.
    """
    config = Config()
    setup_logging(
        level=log_level or config.log_level,
        log_file=log_file or config.log_file,
        jsonl=config.jsonl_log,
    )
    ctx.obj = config


@cli.command("export")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--name", "-n", default=None, help="Output file name without extension")
@click.option(
    "--out",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: TABIO_OUTPUT_DIR or current directory)",
)
@click.option("--sheet", "-s", default=None, help="Sheet name (default: Sheet1)")
@click.pass_obj
def export_cmd(config: Config, input_file: Path, name: str | None, out: Path | None, sheet: str | None):
    """Export the records in INPUT_FILE (JSON or YAML list) to a spreadsheet."""
    try:
        records = load_records(input_file)
        options = config.export_options(sheet_name=sheet, output_dir=out)
        path = export_tabular(records, name or input_file.stem, options)
    except (TabioError, ValueError, OSError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    console.print(f"[green]Done![/green] Wrote {len(records)} records")
    console.print(f"Saved to: {path}")


@cli.command("import")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["json", "yaml", "table"]),
    default="json",
    help="Output format",
)
@click.option("--sheet", "-s", default=None, help="Sheet to read (default: first sheet)")
@click.option("--skip-blank", is_flag=True, help="Drop rows with no values")
@click.option("--unique-headers", is_flag=True, help="Fail if a header name repeats")
def import_cmd(
    files: tuple[Path, ...],
    output_format: str,
    sheet: str | None,
    skip_blank: bool,
    unique_headers: bool,
):
    """
    Import records from the first of FILES.

    The files act as a file selection; only the first one is read.
    """
    options = ImportOptions(
        sheet_name=sheet,
        skip_blank_rows=skip_blank,
        unique_headers=unique_headers,
    )

    try:
        records = import_from_input(FileInput.from_paths(list(files)), options)
    except TabioError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    if output_format == "yaml":
        click.echo(yaml.safe_dump(records, sort_keys=False, allow_unicode=True), nl=False)
    elif output_format == "table":
        console.print(render_table(records))
    else:
        click.echo(json.dumps(records, indent=2, default=str, ensure_ascii=False))


def main():
    cli()


if __name__ == "__main__":
    main()
