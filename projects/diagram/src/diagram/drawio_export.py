"""draw.io (mxGraph XML) export for diagram pages."""

import xml.etree.ElementTree as ET
from collections.abc import Iterable

from diagram.elements import Cell
from diagram.ids import DEFAULT_LAYER_ID, ROOT_ID
from diagram.page import Page

HOST = "sql2drawio"


def _cell_element(cell: Cell) -> ET.Element:
    """Convert a cell into an mxCell element with its geometry."""
    element = ET.Element(
        "mxCell",
        id=cell.id,
        value=cell.value,
        style=cell.style,
        vertex="1",
        parent=cell.parent,
    )
    geometry = cell.geometry
    ET.SubElement(
        element,
        "mxGeometry",
        {
            "x": str(geometry.x),
            "y": str(geometry.y),
            "width": str(geometry.width),
            "height": str(geometry.height),
            "as": "geometry",
        },
    )
    return element


def _diagram_element(page: Page, index: int) -> ET.Element:
    """Build a diagram element holding the page's graph model."""
    diagram = ET.Element("diagram", name=page.name, id=f"page-{index}")
    model = ET.SubElement(diagram, "mxGraphModel", grid="1", gridSize="10")
    root = ET.SubElement(model, "root")
    ET.SubElement(root, "mxCell", id=ROOT_ID)
    ET.SubElement(root, "mxCell", id=DEFAULT_LAYER_ID, parent=ROOT_ID)
    root.extend(_cell_element(cell) for cell in page.cells)
    return diagram


def pages_to_drawio(pages: Iterable[Page]) -> bytes:
    """Serialize pages into a draw.io document."""
    mxfile = ET.Element("mxfile", host=HOST)
    mxfile.extend(_diagram_element(page, index) for index, page in enumerate(pages))
    return ET.tostring(mxfile, encoding="utf-8", xml_declaration=True)


def page_to_drawio(page: Page) -> bytes:
    """Serialize a single page into a draw.io document."""
    return pages_to_drawio([page])
