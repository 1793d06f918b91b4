"""
EasyMeta CLI Entry Point

Command-line interface for generating vendor SQL from table metadata.
Generated SQL is written to stdout verbatim so it can be piped.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table as RichTable
from sqlalchemy.exc import SQLAlchemyError

from easymeta.config import Settings, get_settings, load_settings
from easymeta.drivers import (
    Driver,
    DriverRegistry,
    UnknownDriverError,
    UnsupportedOperationError,
    create_default_registry,
    driver_type_for_dialect,
)
from easymeta.extractors import SQLAlchemyTableReader
from easymeta.models.schema import QueryData, QueryOption, Table
from easymeta.utils.logger import setup_logging

app = typer.Typer(
    name="easymeta",
    help="EasyMeta - SQL dialect drivers for metadata browsing",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

DRIVER_OPTION = typer.Option(None, "--driver", "-d", help="Driver type (e.g. PostgreSql)")


@dataclass
class AppContext:
    """State shared by every command of one invocation."""

    settings: Settings
    registry: DriverRegistry


@app.callback()
def main_callback(
    ctx: typer.Context,
    env_file: Optional[Path] = typer.Option(None, "--env", "-e", help="Path to .env file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    EasyMeta - SQL dialect drivers for metadata browsing.

    Examples:
        easymeta drivers                          # List available drivers
        easymeta ddl orders.json -d MySql         # CREATE TABLE for MySQL
        easymeta query --schema s --table t       # Paginated data query
        easymeta inspect orders --url sqlite:///app.db -d PostgreSql
    """
    settings = load_settings(env_file) if env_file else get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    ctx.obj = AppContext(settings=settings, registry=create_default_registry())


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {message}[/red]", soft_wrap=True)
    return typer.Exit(1)


def _resolve_driver(ctx: typer.Context, driver_type: Optional[str]) -> Driver:
    app_ctx: AppContext = ctx.obj
    try:
        return app_ctx.registry.get(driver_type or app_ctx.settings.default_driver)
    except UnknownDriverError as e:
        raise _fail(str(e)) from e


def _load_table(table_file: Path) -> Table:
    try:
        return Table.model_validate_json(table_file.read_text(encoding="utf-8"))
    except OSError as e:
        raise _fail(f"Cannot read {table_file}: {e}") from e
    except ValidationError as e:
        raise _fail(f"Invalid table metadata in {table_file}: {e}") from e


@app.command()
def drivers(ctx: typer.Context):
    """
    List the registered drivers.
    """
    app_ctx: AppContext = ctx.obj

    table = RichTable(title="Registered Drivers")
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Class", style="magenta")

    for driver in app_ctx.registry:
        table.add_row(driver.type, driver.name, driver.__class__.__name__)

    console.print(table)


@app.command()
def schema(
    ctx: typer.Context,
    schema_name: str = typer.Argument(..., help="Schema to create"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Print the CREATE SCHEMA statement.
    """
    selected = _resolve_driver(ctx, driver)
    try:
        typer.echo(selected.query_schema_create_statement(schema_name))
    except UnsupportedOperationError as e:
        raise _fail(str(e)) from e


@app.command()
def select(
    ctx: typer.Context,
    table_file: Path = typer.Argument(..., help="JSON file with table metadata"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Print a SELECT listing every column of a table.
    """
    selected = _resolve_driver(ctx, driver)
    typer.echo(selected.select_all_statement(_load_table(table_file)))


@app.command()
def ddl(
    ctx: typer.Context,
    table_file: Path = typer.Argument(..., help="JSON file with table metadata"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Print the CREATE TABLE statement of a table.
    """
    selected = _resolve_driver(ctx, driver)
    typer.echo(selected.create_table_statement(_load_table(table_file)))


@app.command()
def drop(
    ctx: typer.Context,
    table_file: Path = typer.Argument(..., help="JSON file with table metadata"),
    truncate: bool = typer.Option(False, "--truncate", help="Truncate instead of drop"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Print the DROP TABLE (or TRUNCATE TABLE) statement of a table.
    """
    selected = _resolve_driver(ctx, driver)
    table = _load_table(table_file)
    if truncate:
        typer.echo(selected.truncate_table_statement(table))
    else:
        typer.echo(selected.drop_table_statement(table))


@app.command()
def query(
    ctx: typer.Context,
    schema_name: str = typer.Option(..., "--schema", "-s", help="Schema name"),
    table_name: str = typer.Option(..., "--table", "-t", help="Table name"),
    where: Optional[str] = typer.Option(None, "--where", help="Filter predicate"),
    order: Optional[str] = typer.Option(None, "--order", help="Order by expression"),
    limit_start: Optional[str] = typer.Option(None, "--limit-start", help="First row"),
    limit_end: Optional[str] = typer.Option(None, "--limit-end", help="Row limit"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Print a paginated data query.
    """
    selected = _resolve_driver(ctx, driver)
    query_data = QueryData(
        schema_name=schema_name,
        table_name=table_name,
        option=QueryOption(
            where=where, order=order, limit_start=limit_start, limit_end=limit_end
        ),
    )
    typer.echo(selected.query_data_statement(query_data))


@app.command()
def inspect(
    ctx: typer.Context,
    table_name: str = typer.Argument(..., help="Table to read"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="SQLAlchemy database URL"),
    schema_name: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema name"),
    driver: Optional[str] = DRIVER_OPTION,
):
    """
    Read a table from a live database and print its CREATE TABLE statement.

    Without --driver the driver matching the source database is used.
    """
    app_ctx: AppContext = ctx.obj
    database_url = url or app_ctx.settings.database_url
    if not database_url:
        raise _fail("No database URL given. Use --url or set EASYMETA_DATABASE_URL.")

    try:
        with SQLAlchemyTableReader(database_url) as reader:
            if driver is None:
                driver = driver_type_for_dialect(reader.dialect_name)
            selected = _resolve_driver(ctx, driver)
            table = reader.read_table(
                table_name, schema=schema_name or app_ctx.settings.default_schema
            )
    except (ConnectionError, UnknownDriverError, SQLAlchemyError) as e:
        raise _fail(str(e)) from e

    typer.echo(selected.create_table_statement(table))


@app.command()
def config(ctx: typer.Context):
    """
    Show current configuration.
    """
    settings = ctx.obj.settings

    console.print("\n[bold blue]EasyMeta Configuration[/bold blue]")
    console.print("-" * 40)
    console.print(f"  Default driver: {settings.default_driver}")
    console.print(f"  Default schema: {settings.default_schema or '[yellow]connection default[/yellow]'}")
    console.print(f"  Database URL: {settings.database_url or '[yellow]not set[/yellow]'}")
    console.print(f"  Log level: {settings.log_level}")
    if settings.log_file:
        console.print(
            f"  Log file: {settings.log_file} "
            f"(rotation {settings.log_rotation}, retention {settings.log_retention})"
        )


@app.command()
def version():
    """
    Show version information.
    """
    from easymeta import __version__

    console.print(f"EasyMeta version: [green]{__version__}[/green]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
