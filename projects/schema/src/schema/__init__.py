"""Schema metadata extraction for SQLite databases."""

from schema.main import list_tables, read_only_sqlite, read_table, sqlite_to_schema
from schema.type_conversion import UnknownTypeError, format_type, parse_type
from schema.types import ColumnMetadata, LogicalType, TableMetadata

__all__ = [
    "ColumnMetadata",
    "LogicalType",
    "TableMetadata",
    "UnknownTypeError",
    "format_type",
    "list_tables",
    "parse_type",
    "read_only_sqlite",
    "read_table",
    "sqlite_to_schema",
]
