"""UML class nodes and the mxGraph cells they render to."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from schema import ColumnMetadata, format_type

from diagram.ids import DEFAULT_LAYER_ID

if TYPE_CHECKING:
    from diagram.ids import SequenceIdGenerator

# draw.io defaults for the UML "Class" shape
HEADER_HEIGHT = 26
ROW_HEIGHT = 26

CONTAINER_STYLE = (
    "swimlane;fontStyle=1;align=center;verticalAlign=top;childLayout=stackLayout;"
    "horizontal=1;startSize=26;horizontalStack=0;resizeParent=1;resizeParentMax=0;"
    "resizeLast=0;collapsible=1;marginBottom=0;whiteSpace=wrap;html=1;"
)
FIELD_STYLE = (
    "text;strokeColor=none;fillColor=none;align=left;verticalAlign=top;"
    "spacingLeft=4;spacingRight=4;overflow=hidden;rotatable=0;"
    "points=[[0,0.5],[1,0.5]];portConstraint=eastwest;whiteSpace=wrap;html=1;"
)


class LayoutError(RuntimeError):
    """Raised when an element is rendered before it has been positioned."""


class Geometry(NamedTuple):
    """Bounding box of a cell, relative to its parent."""

    x: int
    y: int
    width: int
    height: int


class Cell(NamedTuple):
    """A single vertex in the mxGraph model."""

    id: str
    value: str
    style: str
    parent: str
    geometry: Geometry


class Field(NamedTuple):
    """A row inside a UML class."""

    id: str
    label: str


def field_label(column: ColumnMetadata) -> str:
    """Render a column as a UML field label, e.g. ``id: INTEGER NOT NULL``."""
    qualifier = "NOT NULL" if column.not_null else ""
    return f"{column.name}: {format_type(column.type)} {qualifier}"


class UMLClass:
    """A class box with a title row and one stacked row per field."""

    def __init__(
        self,
        title: str,
        width: int,
        ids: SequenceIdGenerator,
        parent: str = DEFAULT_LAYER_ID,
    ) -> None:
        """Create an empty, unpositioned class drawing ids from the generator."""
        self.title = title
        self.width = width
        self.parent = parent
        self.id = ids.next_id()
        self._ids = ids
        self._fields: list[Field] = []
        self._position: tuple[int, int] | None = None

    @property
    def fields(self) -> tuple[Field, ...]:
        """Return the fields in the order they were added."""
        return tuple(self._fields)

    @property
    def height(self) -> int:
        """Return the total height of the title and all field rows."""
        return HEADER_HEIGHT + ROW_HEIGHT * len(self._fields)

    @property
    def position(self) -> tuple[int, int]:
        """Return the (x, y) position of the class."""
        if self._position is None:
            msg = f"Class {self.title!r} has no position"
            raise LayoutError(msg)
        return self._position

    def add_field(self, label: str) -> None:
        """Append a field row below the existing ones."""
        self._fields.append(Field(self._ids.next_id(), label))

    def set_position(self, x: int, y: int) -> None:
        """Place the class on the page."""
        self._position = (x, y)

    def into_cells(self) -> list[Cell]:
        """Render the class as a container cell followed by its field cells."""
        x, y = self.position
        container = Cell(
            id=self.id,
            value=self.title,
            style=CONTAINER_STYLE,
            parent=self.parent,
            geometry=Geometry(x, y, self.width, self.height),
        )
        return [
            container,
            *(
                Cell(
                    id=field.id,
                    value=field.label,
                    style=FIELD_STYLE,
                    parent=self.id,
                    geometry=Geometry(
                        0,
                        HEADER_HEIGHT + ROW_HEIGHT * index,
                        self.width,
                        ROW_HEIGHT,
                    ),
                )
                for index, field in enumerate(self._fields)
            ),
        ]
