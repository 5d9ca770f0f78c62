"""Tests for reading table metadata from SQLite."""

import sqlite3
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import Connection
from sqlalchemy.exc import OperationalError

from schema import (
    ColumnMetadata,
    TableMetadata,
    UnknownTypeError,
    list_tables,
    read_only_sqlite,
    read_table,
    sqlite_to_schema,
)
from schema.types import BOOLEAN, INTEGER, TEXT, TIMESTAMP, varchar


def create_database(*statements: str) -> Path:
    """Create a temporary SQLite file and run the given statements."""
    with tempfile.NamedTemporaryFile(suffix=".sqlite", delete=False) as f:
        db_path = Path(f.name)

    conn = sqlite3.connect(db_path)
    for statement in statements:
        conn.execute(statement)
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture(name="library_database")
def library_sample_database() -> Iterator[Path]:
    """Create a sample library database for testing."""
    db_path = create_database(
        """
        CREATE TABLE authors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(100) NOT NULL,
            bio TEXT
        )
        """,
        """
        CREATE TABLE books (
            id INTEGER NOT NULL,
            author_id INTEGER NOT NULL,
            title VARCHAR NOT NULL,
            available BOOLEAN,
            added_at TIMESTAMP,
            FOREIGN KEY (author_id) REFERENCES authors(id)
        )
        """,
        "INSERT INTO authors (name) VALUES ('Ursula')",
    )
    yield db_path
    db_path.unlink()


@pytest.fixture(name="connection")
def library_connection(library_database: Path) -> Iterator[Connection]:
    """Open a read-only connection to the library database."""
    engine = read_only_sqlite(library_database)
    with engine.connect() as conn:
        yield conn
    engine.dispose()


def test_list_tables_in_creation_order(connection: Connection) -> None:
    """Test tables are listed in the order SQLite reports them."""
    assert list_tables(connection) == ["authors", "books"]


def test_list_tables_excludes_internal_tables(connection: Connection) -> None:
    """Test sqlite_sequence created by AUTOINCREMENT is not listed."""
    tables = list_tables(connection)
    assert "sqlite_sequence" not in tables
    assert not any(name.startswith("sqlite_") for name in tables)


def test_list_tables_treats_prefix_literally() -> None:
    """Test names that only resemble the internal prefix are kept."""
    db_path = create_database(
        "CREATE TABLE sqliteXnotes (id INTEGER)",
        "CREATE TABLE sqlitenotes (id INTEGER)",
    )
    try:
        engine = read_only_sqlite(db_path)
        with engine.connect() as conn:
            assert list_tables(conn) == ["sqliteXnotes", "sqlitenotes"]
        engine.dispose()
    finally:
        db_path.unlink()


def test_read_table_preserves_column_order(connection: Connection) -> None:
    """Test columns come back in column-index order with mapped types."""
    books = read_table("books", connection)
    assert books == TableMetadata(
        name="books",
        columns=(
            ColumnMetadata("id", INTEGER, not_null=True),
            ColumnMetadata("author_id", INTEGER, not_null=True),
            ColumnMetadata("title", varchar(), not_null=True),
            ColumnMetadata("available", BOOLEAN, not_null=False),
            ColumnMetadata("added_at", TIMESTAMP, not_null=False),
        ),
    )


def test_read_table_bounded_varchar(connection: Connection) -> None:
    """Test VARCHAR(n) columns carry their length."""
    authors = read_table("authors", connection)
    assert [column.name for column in authors.columns] == ["id", "name", "bio"]
    assert authors.columns[1].type == varchar(100)
    assert authors.columns[1].not_null
    assert authors.columns[2].type == TEXT


def test_read_table_with_quoted_name() -> None:
    """Test table names needing quotes are passed safely to the pragma."""
    db_path = create_database('CREATE TABLE "order items" ("the name" TEXT NOT NULL)')
    try:
        engine = read_only_sqlite(db_path)
        with engine.connect() as conn:
            table = read_table("order items", conn)
        engine.dispose()
    finally:
        db_path.unlink()

    assert table.columns == (ColumnMetadata("the name", TEXT, not_null=True),)


def test_sqlite_to_schema_reads_every_table(connection: Connection) -> None:
    """Test the whole schema is read in listing order."""
    tables = sqlite_to_schema(connection)
    assert [table.name for table in tables] == ["authors", "books"]
    assert len(tables[1].columns) == 5


def test_empty_database_has_no_tables() -> None:
    """Test an empty database yields no tables rather than failing."""
    db_path = create_database()
    try:
        engine = read_only_sqlite(db_path)
        with engine.connect() as conn:
            assert list_tables(conn) == []
            assert sqlite_to_schema(conn) == []
        engine.dispose()
    finally:
        db_path.unlink()


def test_unknown_column_type_is_fatal() -> None:
    """Test an unrecognized declared type stops the read."""
    db_path = create_database("CREATE TABLE prices (amount NUMERIC(10, 2))")
    try:
        engine = read_only_sqlite(db_path)
        with engine.connect() as conn, pytest.raises(UnknownTypeError):
            read_table("prices", conn)
        engine.dispose()
    finally:
        db_path.unlink()


@pytest.mark.parametrize("file_name", ["proj#1.sqlite", "a%20b.sqlite", "what?.sqlite"])
def test_read_only_sqlite_special_characters(tmp_path: Path, file_name: str) -> None:
    """Test file names with URI characters open that exact file."""
    db_path = tmp_path / file_name
    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE notes (body TEXT)")
    conn.commit()
    conn.close()

    engine = read_only_sqlite(db_path)
    with engine.connect() as connection:
        assert list_tables(connection) == ["notes"]
    engine.dispose()

    assert sorted(path.name for path in tmp_path.iterdir()) == [file_name]


def test_read_only_sqlite_rejects_writes(library_database: Path) -> None:
    """Test the engine cannot modify the database."""
    engine = read_only_sqlite(library_database)
    with engine.connect() as connection, pytest.raises(OperationalError):
        connection.exec_driver_sql("CREATE TABLE extra (id INTEGER)")
    engine.dispose()


def test_missing_database_fails_to_open(tmp_path: Path) -> None:
    """Test opening a missing file raises instead of creating it."""
    missing = tmp_path / "missing.sqlite"
    engine = read_only_sqlite(missing)
    with pytest.raises(OperationalError):
        engine.connect()
    assert not missing.exists()
