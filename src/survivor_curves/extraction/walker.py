"""Row walker: turns table rows into survivor sequences."""
from __future__ import annotations

from typing import Sequence

from ..errors import InsufficientRows, MalformedCellValue, NonMonotonicSequence, ValueOutOfRange
from ..models import MIN_AGES, NORMALIZATION_BASE, ColumnIndices, SurvivorCurve
from .text import parse_count


class RowWalker:
    """Walk table rows in document order and collect one value pair per age.

    A row is a data row only when its row-number cell reads the next expected
    age. Anything else (headers, blank separators, repeated age-0 rows,
    subtotals) is skipped without advancing the expected age.
    """

    def __init__(self, base: int = NORMALIZATION_BASE) -> None:
        self.base = base

    def walk(
        self, rows: Sequence[Sequence[str]], indices: ColumnIndices
    ) -> tuple[list[float], list[float]]:
        """Return (male, female) survivor fractions in ascending age order.

        Raises:
            MalformedCellValue: A data row's survivor cell is not a count
            ValueOutOfRange: A survivor fraction exceeds 1.0
            NonMonotonicSequence: Survivors increase with age
        """
        male: list[float] = []
        female: list[float] = []
        next_age = 0

        for cells in rows:
            # Index k needs at least k + 1 cells
            if len(cells) < indices.min_cells:
                continue
            if parse_count(cells[indices.row_number]) != next_age:
                continue

            male.append(self._accept("male", next_age, cells[indices.male], male))
            female.append(self._accept("female", next_age, cells[indices.female], female))
            next_age += 1

        return male, female

    def _accept(self, column: str, age: int, text: str, accepted: list[float]) -> float:
        count = parse_count(text)
        if count is None:
            raise MalformedCellValue(column, age, text)
        value = count / self.base
        if value > 1.0:
            raise ValueOutOfRange(
                f"{column} value {count} at age {age} exceeds the cohort size {self.base}"
            )
        if accepted and value > accepted[-1]:
            raise NonMonotonicSequence(
                f"{column} survivors increase at age {age}: {accepted[-1]} -> {value}"
            )
        return value


def build_curve(male: Sequence[float], female: Sequence[float]) -> SurvivorCurve:
    """Validate walked sequences and freeze them into a SurvivorCurve.

    Raises:
        InsufficientRows: The table covers MIN_AGES ages or fewer
    """
    if len(male) != len(female) or len(male) <= MIN_AGES:
        raise InsufficientRows(
            f"table yielded {len(male)} male / {len(female)} female ages, "
            f"need more than {MIN_AGES}"
        )
    return SurvivorCurve(male=tuple(male), female=tuple(female))
