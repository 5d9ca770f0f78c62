"""Command line interface for sql2drawio."""

import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from diagram import page_to_drawio, schema_to_diagram
from diagram.layout import DEFAULT_TABLE_WIDTH
from diagram.page import DEFAULT_PAGE_NAME
from rich.console import Console
from rich.logging import RichHandler
from schema import UnknownTypeError, list_tables, read_only_sqlite, read_table
from sqlalchemy.exc import SQLAlchemyError

app = App(help="Generate a draw.io class diagram from a SQLite database.")

err_console = Console(stderr=True)

# Constants
DEFAULT_OUTPUT = Path("sql.drawio")


def print_error(message: str) -> None:
    """Print error message to stderr."""
    err_console.print(f"[bold red]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print success message to stderr."""
    err_console.print(f"[bold green]✓[/] {message}")


def print_info(message: str) -> None:
    """Print info message to stderr."""
    err_console.print(f"[bold blue]i[/] {message}")


def configure_logging(*, verbose: bool) -> None:
    """Route library logging through rich when verbose output is requested."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def validate_database_location(database_location: Path) -> None:
    """Validate database location."""
    if not database_location.is_file():
        print_error(f"Database file does not exist: {database_location}")
        sys.exit(1)


def validate_width(width: int) -> None:
    """Validate table width."""
    if width <= 0:
        print_error(f"Width must be a positive number of pixels, got {width}")
        sys.exit(1)


@app.default
def generate(
    database: Annotated[Path, Parameter(name=["--database", "-d"])],
    *,
    output: Annotated[Path, Parameter(name=["--output", "-o"])] = DEFAULT_OUTPUT,
    width: Annotated[int, Parameter(name=["--width", "-w"])] = DEFAULT_TABLE_WIDTH,
    page: Annotated[str, Parameter(name=["--page", "-p"])] = DEFAULT_PAGE_NAME,
    verbose: Annotated[bool, Parameter(name=["--verbose", "-v"])] = False,
) -> None:
    """Generate a draw.io diagram with one class per table.

    Args:
        database: Path to the SQLite database
        output: Output file name
        width: The width of each table
        page: Page name
        verbose: Log every table read and placed

    """
    configure_logging(verbose=verbose)
    validate_database_location(database)
    validate_width(width)
    print_info(f"Database: {database}")

    try:
        with read_only_sqlite(database).connect() as connection:
            table_names = list_tables(connection)
            print_info(f"Tables: {', '.join(table_names) or '(none)'}")
            tables = [read_table(name, connection) for name in table_names]
    except UnknownTypeError as e:
        print_error(f"Failed to read schema: {e}")
        sys.exit(1)
    except SQLAlchemyError as e:
        print_error(f"Failed to query database: {e}")
        sys.exit(1)

    diagram_page = schema_to_diagram(tables, page_name=page, width=width)
    try:
        output.write_bytes(page_to_drawio(diagram_page))
    except OSError as e:
        print_error(f"Failed to write output file: {e}")
        sys.exit(1)

    print_success(f"Diagram written to {output}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
