"""Whole-page extraction: HTML in, SurvivorCurve out."""
from __future__ import annotations

from bs4 import BeautifulSoup

from ..errors import ExtractionError
from ..models import SurvivorCurve
from .columns import ColumnIdentifier, SentinelColumnIdentifier
from .locator import locate_table, table_rows
from .walker import RowWalker, build_curve


def parse_life_table(
    html: str,
    year: int | None = None,
    identifier: ColumnIdentifier | None = None,
    walker: RowWalker | None = None,
) -> SurvivorCurve:
    """Extract the male/female survivor curve from one life-table page.

    Args:
        html: Raw page markup
        year: Table year, attached to any error raised
        identifier: Column inference strategy (sentinel values by default)
        walker: Row walker (cohort base of 100,000 by default)

    Returns:
        The validated survivor curve

    Raises:
        ExtractionError: Any page-level failure, stamped with ``year``
    """
    identifier = identifier or SentinelColumnIdentifier()
    walker = walker or RowWalker()

    try:
        soup = BeautifulSoup(html, "html.parser")
        rows = table_rows(locate_table(soup))
        indices = identifier.identify(rows)
        if indices is None:
            # Unresolved columns mean no data rows at all
            male: list[float] = []
            female: list[float] = []
        else:
            male, female = walker.walk(rows, indices)
        return build_curve(male, female)
    except ExtractionError as exc:
        if exc.year is None:
            exc.year = year
        raise
