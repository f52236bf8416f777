"""Column layout of one life-table page."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnIndices:
    """Positions of the row-number and survivor columns within a table row.

    Resolved once per page and read-only afterwards.
    """

    row_number: int
    male: int
    female: int

    def __post_init__(self) -> None:
        positions = (self.row_number, self.male, self.female)
        if min(positions) < 0:
            raise ValueError(f"column indices must be non-negative, got {positions}")
        if len(set(positions)) != 3:
            raise ValueError(f"column indices must be distinct, got {positions}")
        if self.male > self.female:
            raise ValueError("male column must precede female column")

    @property
    def max_index(self) -> int:
        return max(self.row_number, self.male, self.female)

    @property
    def min_cells(self) -> int:
        """Number of cells a row needs before every index can be read."""
        return self.max_index + 1
