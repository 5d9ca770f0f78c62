"""Main module for reading table metadata from SQLite databases."""

import sqlite3
from logging import getLogger
from pathlib import Path

from sqlalchemy import Connection, Engine, create_engine, text

from schema.type_conversion import parse_type
from schema.types import ColumnMetadata, TableMetadata

logger = getLogger(__name__)

# Tables SQLite creates for its own bookkeeping (sqlite_sequence, sqlite_stat1, ...)
INTERNAL_PREFIX = "sqlite_"

LIST_TABLES = text(
    """
    SELECT name FROM sqlite_schema
    WHERE type = 'table' AND name NOT LIKE :prefix ESCAPE '\\'
    """,
)

TABLE_INFO = text(
    """
    SELECT cid, name, type, "notnull" FROM pragma_table_info(:table_name)
    ORDER BY cid
    """,
)


def read_only_sqlite(sqlite_location: Path) -> Engine:
    """Create a read-only SQLAlchemy engine for SQLite database.

    The path is percent-encoded into a ``file:`` URI, so ``#``, ``?`` and ``%``
    in file names are taken literally.
    """
    database_uri = f"{sqlite_location.resolve().as_uri()}?mode=ro"
    return create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(database_uri, uri=True),
    )


def _like_prefix(prefix: str) -> str:
    """Build a LIKE pattern matching names that start with the literal prefix."""
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"{escaped}%"


def list_tables(connection: Connection) -> list[str]:
    """Return user table names in the order SQLite reports them."""
    rows = connection.execute(LIST_TABLES, {"prefix": _like_prefix(INTERNAL_PREFIX)})
    return [row.name for row in rows]


def read_table(table_name: str, connection: Connection) -> TableMetadata:
    """Read the columns of a table in column-index order.

    Raises:
        UnknownTypeError: If a column declares a type with no logical counterpart

    """
    logger.debug("Reading columns of table %s", table_name)
    rows = connection.execute(TABLE_INFO, {"table_name": table_name})
    return TableMetadata(
        name=table_name,
        columns=tuple(
            ColumnMetadata(
                name=row.name,
                type=parse_type(row.type),
                not_null=bool(row.notnull),
            )
            for row in rows
        ),
    )


def sqlite_to_schema(connection: Connection) -> list[TableMetadata]:
    """Read metadata for every user table in listing order."""
    return [read_table(name, connection) for name in list_tables(connection)]
