"""Page that collects rendered cells for the diagram file."""

from collections.abc import Iterable

from diagram.elements import Cell

DEFAULT_PAGE_NAME = "Model"


class Page:
    """A named diagram page holding cells in insertion order."""

    def __init__(self, name: str = DEFAULT_PAGE_NAME) -> None:
        """Initialize an empty page."""
        self.name = name
        self._cells: list[Cell] = []

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Return every cell appended so far."""
        return tuple(self._cells)

    def append(self, cells: Iterable[Cell]) -> None:
        """Add cells after the existing ones, as given."""
        self._cells.extend(cells)


def new_page(name: str = DEFAULT_PAGE_NAME) -> Page:
    """Create an empty page with the given name."""
    return Page(name)
