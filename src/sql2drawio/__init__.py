"""Generate draw.io class diagrams from SQLite schemas."""
