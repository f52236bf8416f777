"""Column identification for life-table rows.

Columns are recognised by what they contain, not where they sit or what the
header says. The first data row of a cohort table reads age "0" and
"100000" survivors for each sex, and no header cell ever holds those exact
values, so the sentinels survive column reordering, extra decorative columns
and header rows.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import structlog

from ..errors import AsymmetricColumns, MissingRowNumberColumn, TooManyMatchingColumns
from ..models import NORMALIZATION_BASE, ColumnIndices

logger = structlog.get_logger(__name__)


@runtime_checkable
class ColumnIdentifier(Protocol):
    """Strategy that locates the row-number and survivor columns of a table."""

    def identify(self, rows: Sequence[Sequence[str]]) -> ColumnIndices | None:
        """Scan normalized rows and return the column layout.

        Args:
            rows: Normalized cell texts per table row, in document order

        Returns:
            The resolved indices, or None when no row resolves them
        """
        ...


class SentinelColumnIdentifier:
    """Find columns by the sentinel values of the age-0 row.

    The first cell reading ``row_sentinel`` marks the row-number column. The
    first and second cells reading ``survivor_sentinel`` mark the male and
    female survivor columns, in that order.
    """

    def __init__(
        self,
        row_sentinel: str = "0",
        survivor_sentinel: str = str(NORMALIZATION_BASE),
    ) -> None:
        self.row_sentinel = row_sentinel
        self.survivor_sentinel = survivor_sentinel

    def identify(self, rows: Sequence[Sequence[str]]) -> ColumnIndices | None:
        for row in rows:
            indices = self.identify_row(row)
            if indices is not None:
                logger.debug(
                    "lifetable.columns",
                    row_number=indices.row_number,
                    male=indices.male,
                    female=indices.female,
                )
                return indices
        return None

    def identify_row(self, cells: Sequence[str]) -> ColumnIndices | None:
        """Resolve column indices from a single row, or None if it holds no sentinels.

        Raises:
            TooManyMatchingColumns: A third survivor sentinel appears in the row
            AsymmetricColumns: Only one survivor sentinel appears in the row
            MissingRowNumberColumn: Survivor sentinels appear without a row sentinel
        """
        row_number: int | None = None
        male: int | None = None
        female: int | None = None

        for position, text in enumerate(cells):
            if text == self.row_sentinel:
                # Only the first row-number candidate counts
                if row_number is None:
                    row_number = position
            elif text == self.survivor_sentinel:
                if male is None:
                    male = position
                elif female is None:
                    female = position
                else:
                    raise TooManyMatchingColumns(
                        f"found a third {self.survivor_sentinel!r} column at position {position}"
                    )

        if male is None:
            return None
        if female is None:
            raise AsymmetricColumns(
                f"found male column {male} but no female {self.survivor_sentinel!r} column"
            )
        if row_number is None:
            raise MissingRowNumberColumn(
                f"found survivor columns {male} and {female} but no {self.row_sentinel!r} column"
            )
        return ColumnIndices(row_number=row_number, male=male, female=female)
