"""Cell text normalization."""
from __future__ import annotations

import re

from bs4 import Tag

_COUNT_RE = re.compile(r"[0-9]+")


def cell_text(cell: Tag) -> str:
    """Flatten a cell to comparable text.

    All text nodes are joined, surrounding whitespace trimmed and thousands
    separators removed, so "100,000" and "<b>100</b>,000" both read "100000".
    """
    return "".join(cell.strings).strip().replace(",", "")


def parse_count(text: str) -> int | None:
    """Parse normalized cell text as a non-negative integer, or None."""
    if not _COUNT_RE.fullmatch(text):
        return None
    return int(text)
