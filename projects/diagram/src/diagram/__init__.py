"""draw.io diagram generation package."""

from diagram.drawio_export import page_to_drawio, pages_to_drawio
from diagram.elements import Cell, Geometry, LayoutError, UMLClass, field_label
from diagram.ids import SequenceIdGenerator
from diagram.layout import layout_tables, table_to_element
from diagram.main import schema_to_diagram, sqlite_to_diagram
from diagram.page import Page, new_page

__all__ = [
    "Cell",
    "Geometry",
    "LayoutError",
    "Page",
    "SequenceIdGenerator",
    "UMLClass",
    "field_label",
    "layout_tables",
    "new_page",
    "page_to_drawio",
    "pages_to_drawio",
    "schema_to_diagram",
    "sqlite_to_diagram",
    "table_to_element",
]
