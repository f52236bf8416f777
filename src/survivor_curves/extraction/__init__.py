"""Life-table page extraction.

A page is processed in three stages over its largest table:

- locate_table: pick the table with the most rows
- ColumnIdentifier: infer row-number and survivor columns from cell content
- RowWalker: walk rows in age order and build the two survivor sequences

parse_life_table ties the stages together for a raw HTML document.
"""
from .columns import ColumnIdentifier, SentinelColumnIdentifier
from .locator import locate_table, table_rows
from .page import parse_life_table
from .text import cell_text, parse_count
from .walker import RowWalker, build_curve

__all__ = [
    "ColumnIdentifier",
    "SentinelColumnIdentifier",
    "RowWalker",
    "build_curve",
    "cell_text",
    "locate_table",
    "parse_count",
    "parse_life_table",
    "table_rows",
]
