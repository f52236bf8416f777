"""Batch aggregation of survivor curves across table years."""
from __future__ import annotations

from typing import Callable, Iterable, Protocol

import structlog

from .errors import LifeTableError
from .extraction import ColumnIdentifier, parse_life_table
from .models import YearlyDataset

logger = structlog.get_logger(__name__)


class PageSource(Protocol):
    """Anything that can produce a page URL and body for a table year."""

    def url_for(self, year: int) -> str: ...

    async def fetch_year(self, year: int) -> str: ...


def batch_years(start: int = 1900, end: int = 2100, step: int = 10) -> list[int]:
    """Table years from start to end inclusive, every ``step`` years."""
    if step <= 0:
        raise ValueError(f"step must be positive, got: {step}")
    if start > end:
        raise ValueError(f"start ({start}) must not be after end ({end})")
    return list(range(start, end + 1, step))


async def collect_curves(
    source: PageSource,
    years: Iterable[int],
    identifier: ColumnIdentifier | None = None,
    on_year: Callable[[int], None] | None = None,
) -> YearlyDataset:
    """Fetch and extract every year in order.

    Years run strictly one after another; the first failure aborts the batch
    and nothing is returned for the years already done.

    Args:
        source: Page fetcher
        years: Table years, processed in the given order
        identifier: Column inference strategy passed to the page parser
        on_year: Called with each year once its curve is accepted

    Raises:
        LifeTableError: The first fetch or extraction failure, stamped with its year
    """
    dataset = YearlyDataset()
    for year in years:
        logger.info("lifetable.year.start", year=year, url=source.url_for(year))
        try:
            html = await source.fetch_year(year)
            curve = parse_life_table(html, year=year, identifier=identifier)
        except LifeTableError as exc:
            if exc.year is None:
                exc.year = year
            logger.error("lifetable.year.failed", year=year, kind=exc.kind, error=exc.message)
            raise
        dataset.add(year, curve)
        logger.info("lifetable.year.done", year=year, ages=curve.ages)
        if on_year is not None:
            on_year(year)
    return dataset
