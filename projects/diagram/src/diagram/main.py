"""Main module for draw.io diagram generation."""

from collections.abc import Iterable

from schema import TableMetadata, sqlite_to_schema
from sqlalchemy import Connection

from diagram.ids import SequenceIdGenerator
from diagram.layout import DEFAULT_TABLE_WIDTH, layout_tables
from diagram.page import DEFAULT_PAGE_NAME, Page, new_page


def schema_to_diagram(
    tables: Iterable[TableMetadata],
    *,
    page_name: str = DEFAULT_PAGE_NAME,
    width: int = DEFAULT_TABLE_WIDTH,
    ids: SequenceIdGenerator | None = None,
) -> Page:
    """Build a page with one UML class per table, in the given order."""
    page = new_page(page_name)
    for element in layout_tables(tables, width, ids or SequenceIdGenerator()):
        page.append(element.into_cells())
    return page


def sqlite_to_diagram(
    connection: Connection,
    *,
    page_name: str = DEFAULT_PAGE_NAME,
    width: int = DEFAULT_TABLE_WIDTH,
    ids: SequenceIdGenerator | None = None,
) -> Page:
    """Generate a page with one UML class per table in the database."""
    return schema_to_diagram(
        sqlite_to_schema(connection),
        page_name=page_name,
        width=width,
        ids=ids,
    )
