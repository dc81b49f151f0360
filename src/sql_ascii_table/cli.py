#!/usr/bin/env python3
"""Command line entry point: run a query and print it as an ASCII table."""
import sys
from typing import Optional

import typer
from babel import UnknownLocaleError
from sqlalchemy import create_engine
from sqlalchemy.exc import ArgumentError
from typing_extensions import Annotated

from .adapter import ResultTableAdapter
from .console import console, handle_cli_errors, print_error
from .logger import configure_logging, get_logger
from .renderer import render_table
from .settings import settings

logger = get_logger(__name__)

app = typer.Typer(
    name="sql-ascii-table",
    help="Print SQL query results as wrapped ASCII tables.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def global_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (e.g. DEBUG, INFO).")] = None,
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Emit logs as JSON.")] = False,
):
    """
    sql-ascii-table CLI Entry Point.
    """
    configure_logging(level=log_level or settings.log_level, json_format=json_logs or settings.log_json)


@app.command()
@handle_cli_errors
def query(
    url: Annotated[str, typer.Argument(help="SQLAlchemy database URL, e.g. sqlite:///app.db")],
    sql: Annotated[str, typer.Argument(help="SQL statement to execute")],
    max_width: Annotated[Optional[int], typer.Option("--max-width", "-w", min=1, help="Maximum column width before wrapping")] = None,
    locale: Annotated[Optional[str], typer.Option("--locale", help="Locale used to format numbers (e.g. en_US, de_DE)")] = None,
    table_format: Annotated[Optional[str], typer.Option("--format", "-f", help="tabulate table format")] = None,
):
    """
    Execute a statement and print its result.
    """
    try:
        engine = create_engine(url)
    except ArgumentError as e:
        print_error(f"Invalid database URL: {e}")
        sys.exit(2)

    try:
        table = ResultTableAdapter.from_query(engine, sql, max_width, locale)
    except (ValueError, UnknownLocaleError) as e:
        print_error(f"Invalid option: {e}")
        sys.exit(2)
    finally:
        engine.dispose()

    logger.info(f"Fetched {table.row_count} rows from {engine.url.render_as_string(hide_password=True)}")
    console.print(render_table(table, table_format), markup=False, emoji=False, highlight=False, soft_wrap=True)
    suffix = "" if table.row_count == 1 else "s"
    console.print(f"({table.row_count} row{suffix})", highlight=False)


if __name__ == "__main__":
    app()
