"""Tests for cell text normalization."""
from __future__ import annotations

from bs4 import BeautifulSoup

from survivor_curves.extraction import cell_text, parse_count


def _cell(markup: str):
    return BeautifulSoup(f"<table><tr>{markup}</tr></table>", "html.parser").find("td")


class TestCellText:
    """Tests for cell_text."""

    def test_strips_whitespace(self):
        assert cell_text(_cell("<td>\n   42  \n</td>")) == "42"

    def test_removes_thousands_separators(self):
        assert cell_text(_cell("<td>100,000</td>")) == "100000"

    def test_joins_nested_text_nodes(self):
        """Text split across inline markup is concatenated."""
        assert cell_text(_cell("<td><b>99</b>,<i>950</i></td>")) == "99950"

    def test_ignores_comments(self):
        assert cell_text(_cell("<td>1<!-- footnote -->2</td>")) == "12"

    def test_empty_cell(self):
        assert cell_text(_cell("<td></td>")) == ""


class TestParseCount:
    """Tests for parse_count."""

    def test_plain_integer(self):
        assert parse_count("99950") == 99950

    def test_zero(self):
        assert parse_count("0") == 0

    def test_rejects_non_numeric(self):
        assert parse_count("abc") is None
        assert parse_count("") is None
        assert parse_count("Age") is None

    def test_rejects_signed_and_fractional(self):
        assert parse_count("-5") is None
        assert parse_count("0.00123") is None
        assert parse_count("12 a") is None
