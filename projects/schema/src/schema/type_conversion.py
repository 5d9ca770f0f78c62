"""Module for parsing SQLite declared column types into logical types."""

import re
from typing import get_args

from schema.types import Keyword, LogicalType

KEYWORDS: frozenset[str] = frozenset(get_args(Keyword.__value__))

# VARCHAR with an explicit ASCII length, e.g. VARCHAR(255)
BOUNDED_VARCHAR = re.compile(r"VARCHAR\(([0-9]+)\)")


class UnknownTypeError(ValueError):
    """Raised when a declared column type has no logical counterpart."""

    def __init__(self, raw_type: str) -> None:
        """Initialize with the type string that failed to parse."""
        self.raw_type = raw_type
        super().__init__(f"Unrecognized column type: {raw_type!r}")


def parse_type(raw_type: str) -> LogicalType:
    """Parse a declared column type string into a LogicalType.

    Matching is exact and case-sensitive:
        INTEGER -> LogicalType("INTEGER")
        VARCHAR -> LogicalType("VARCHAR", None)
        VARCHAR(20) -> LogicalType("VARCHAR", 20)

    Raises:
        UnknownTypeError: If the string is not a recognized type

    """
    if raw_type in KEYWORDS:
        return LogicalType(raw_type)  # pyright: ignore[reportArgumentType]

    if match := BOUNDED_VARCHAR.fullmatch(raw_type):
        return LogicalType("VARCHAR", int(match[1]))

    raise UnknownTypeError(raw_type)


def format_type(logical_type: LogicalType) -> str:
    """Convert a LogicalType back to its declared type string."""
    match logical_type:
        case LogicalType(keyword="VARCHAR", length=int(length)):
            return f"VARCHAR({length})"
        case LogicalType(keyword=keyword):
            return keyword
