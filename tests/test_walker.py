"""Tests for the row walker and curve builder."""
from __future__ import annotations

import pytest

from survivor_curves.errors import InsufficientRows, MalformedCellValue, NonMonotonicSequence, ValueOutOfRange
from survivor_curves.extraction import RowWalker, SentinelColumnIdentifier, build_curve
from survivor_curves.models import ColumnIndices, SurvivorCurve

SIMPLE = ColumnIndices(row_number=0, male=1, female=2)


class TestRowWalker:
    """Tests for RowWalker.walk."""

    def test_scenario_with_duplicate_age_zero(self):
        """The repeated age-0 row does not match age 1 and is skipped."""
        rows = [
            ["Age", "l(x) male", "l(x) female"],
            ["0", "100000", "100000"],
            ["0", "100000", "100000"],
            ["1", "99950", "99970"],
            ["2", "99800", "99850"],
        ]
        indices = SentinelColumnIdentifier().identify(rows)
        assert indices == ColumnIndices(0, 1, 2)

        male, female = RowWalker().walk(rows, indices)

        assert male == pytest.approx([1.0, 0.9995, 0.998])
        assert female == pytest.approx([1.0, 0.9997, 0.9985])

    def test_skips_rows_out_of_sequence(self):
        rows = [
            ["0", "100000", "100000"],
            ["2", "1", "1"],  # jumps ahead, not a data row
            ["Total", "x", "y"],
            ["1", "90000", "95000"],
        ]
        male, female = RowWalker().walk(rows, SIMPLE)
        assert male == [1.0, 0.9]
        assert female == [1.0, 0.95]

    def test_skips_rows_too_short_for_indices(self):
        """A row needs max_index + 1 cells; exactly max_index is too few."""
        indices = ColumnIndices(row_number=0, male=2, female=4)
        rows = [
            ["0", "q", "100000", "q", "100000"],
            ["1", "q", "99000", "q"],  # four cells, female index 4 missing
            ["1", "q", "98000", "q", "99000"],
        ]
        male, female = RowWalker().walk(rows, indices)
        assert male == [1.0, 0.98]
        assert female == [1.0, 0.99]

    def test_extra_cells_are_fine(self):
        rows = [["0", "100000", "100000", "extra", "more"]]
        assert RowWalker().walk(rows, SIMPLE) == ([1.0], [1.0])

    def test_malformed_male_value(self):
        rows = [["0", "100000", "100000"], ["1", "abc", "99970"]]
        with pytest.raises(MalformedCellValue) as exc_info:
            RowWalker().walk(rows, SIMPLE)
        assert exc_info.value.column == "male"
        assert exc_info.value.row_number == 1
        assert exc_info.value.text == "abc"

    def test_malformed_female_value(self):
        rows = [["0", "100000", "100000"], ["1", "99950", ""]]
        with pytest.raises(MalformedCellValue) as exc_info:
            RowWalker().walk(rows, SIMPLE)
        assert exc_info.value.column == "female"

    def test_increasing_male_value(self):
        rows = [
            ["0", "100000", "100000"],
            ["1", "99950", "99970"],
            ["2", "99960", "99850"],
        ]
        with pytest.raises(NonMonotonicSequence, match="male"):
            RowWalker().walk(rows, SIMPLE)

    def test_increasing_female_value(self):
        rows = [["0", "100000", "99000"], ["1", "99950", "99500"]]
        with pytest.raises(NonMonotonicSequence, match="female"):
            RowWalker().walk(rows, SIMPLE)

    def test_equal_consecutive_values_allowed(self):
        rows = [["0", "100000", "100000"], ["1", "100000", "100000"], ["2", "0", "0"], ["3", "0", "0"]]
        assert RowWalker().walk(rows, SIMPLE) == ([1.0, 1.0, 0.0, 0.0], [1.0, 1.0, 0.0, 0.0])

    def test_value_above_cohort_size(self):
        rows = [["0", "100001", "100000"]]
        with pytest.raises(ValueOutOfRange):
            RowWalker().walk(rows, SIMPLE)

    def test_custom_base(self):
        rows = [["0", "1000", "1000"], ["1", "500", "750"]]
        assert RowWalker(base=1000).walk(rows, SIMPLE) == ([1.0, 0.5], [1.0, 0.75])

    def test_no_data_rows(self):
        assert RowWalker().walk([["Age"], ["Male"]], SIMPLE) == ([], [])


class TestBuildCurve:
    """Tests for build_curve."""

    def test_builds_curve(self):
        values = [1.0 - age / 100 for age in range(51)]
        curve = build_curve(values, values)
        assert isinstance(curve, SurvivorCurve)
        assert curve.ages == 51

    def test_exactly_fifty_ages_rejected(self):
        values = [1.0] * 50
        with pytest.raises(InsufficientRows):
            build_curve(values, values)

    def test_empty_rejected(self):
        with pytest.raises(InsufficientRows):
            build_curve([], [])
