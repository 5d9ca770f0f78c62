"""Typed records for SQLite schema metadata."""

from __future__ import annotations

from typing import Literal, NamedTuple

type Keyword = Literal[
    "TEXT",
    "BLOB",
    "INTEGER",
    "REAL",
    "DOUBLE",
    "BOOLEAN",
    "TIMESTAMP",
    "BIGINT",
    "DATE",
    "VARCHAR",
]


class LogicalType(NamedTuple):
    """Column type understood by the diagram generator.

    Only ``VARCHAR`` carries a payload (its optional length bound).
    """

    keyword: Keyword
    length: int | None = None


TEXT = LogicalType("TEXT")
BLOB = LogicalType("BLOB")
INTEGER = LogicalType("INTEGER")
REAL = LogicalType("REAL")
DOUBLE = LogicalType("DOUBLE")
BOOLEAN = LogicalType("BOOLEAN")
TIMESTAMP = LogicalType("TIMESTAMP")
BIGINT = LogicalType("BIGINT")
DATE = LogicalType("DATE")


def varchar(length: int | None = None) -> LogicalType:
    """Return the VARCHAR type, bounded when a length is given."""
    return LogicalType("VARCHAR", length)


class ColumnMetadata(NamedTuple):
    """A single column as reported by the database."""

    name: str
    type: LogicalType
    not_null: bool


class TableMetadata(NamedTuple):
    """A table and its columns in column-index order."""

    name: str
    columns: tuple[ColumnMetadata, ...]
