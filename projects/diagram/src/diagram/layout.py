"""Horizontal placement of table classes on the page."""

from collections.abc import Iterable
from logging import getLogger

from schema import TableMetadata

from diagram.elements import UMLClass, field_label
from diagram.ids import SequenceIdGenerator

logger = getLogger(__name__)

DEFAULT_TABLE_WIDTH = 150
START_X = 10
START_Y = 30
GUTTER = 20


def table_to_element(
    table: TableMetadata,
    width: int,
    ids: SequenceIdGenerator,
) -> UMLClass:
    """Build an unpositioned class with one field per column."""
    element = UMLClass(table.name, width, ids)
    for column in table.columns:
        element.add_field(field_label(column))
    return element


def layout_tables(
    tables: Iterable[TableMetadata],
    width: int,
    ids: SequenceIdGenerator,
) -> list[UMLClass]:
    """Build classes for the tables and place them left to right."""
    elements: list[UMLClass] = []
    x_offset = START_X
    for table in tables:
        element = table_to_element(table, width, ids)
        element.set_position(x_offset, START_Y)
        logger.debug("Placed %s at x=%d", table.name, x_offset)
        elements.append(element)
        x_offset += element.width + GUTTER
    return elements
