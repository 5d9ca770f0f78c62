"""Sequential identifiers for diagram cells."""

from itertools import count

# Ids of the mxGraph root cell and its default layer
ROOT_ID = "0"
DEFAULT_LAYER_ID = "1"


class SequenceIdGenerator:
    """Hands out unique, increasing string ids for a single diagram run."""

    def __init__(self, start: int = 2) -> None:
        """Initialize the counter; the default skips the root and layer ids."""
        self._counter = count(start)

    def next_id(self) -> str:
        """Return the next unused id."""
        return str(next(self._counter))
