"""Shared fixtures: synthetic life-table pages laid out like the SSA cohort tables."""
from __future__ import annotations

from typing import Callable

import pytest

MALE_SPAN = 110
FEMALE_SPAN = 115


def survivors(age: int, span: int) -> int:
    """Survivors of 100,000 births at ``age``, strictly decreasing up to ``span``."""
    return max(0, round(100_000 * (1 - (age / span) ** 2)))


def sex_cells(age: int, span: int) -> list[str]:
    """q(x), l(x), d(x), e(x) cells for one sex, formatted like the publisher does."""
    alive = survivors(age, span)
    deaths = alive - survivors(age + 1, span)
    q = deaths / alive if alive else 1.0
    return [f"{q:.5f}", f"{alive:,}", f"{deaths:,}", f"{(span - age) * 0.6:.2f}"]


def data_rows(ages: int = 101) -> list[list[str]]:
    return [[str(age)] + sex_cells(age, MALE_SPAN) + sex_cells(age, FEMALE_SPAN) for age in range(ages)]


def render_page(
    rows: list[list[str]],
    header: bool = True,
    decorations: bool = True,
) -> str:
    """Render rows as the largest table on a page with nav and footnote tables."""
    parts = ["<html><head><title>Table 7</title></head><body>"]
    if decorations:
        parts.append("<table><tr><td>Home</td><td>Actuarial Notes</td></tr></table>")
    parts.append("<table border=1>")
    if header:
        parts.append(
            '<tr><th rowspan="2">Age</th><th colspan="4">Male</th><th colspan="4">Female</th></tr>'
        )
        parts.append("<tr>" + "".join(f"<td>{h}</td>" for h in ["q(x)", "l(x)", "d(x)", "e(x)"] * 2) + "</tr>")
    for index, row in enumerate(rows):
        cells = []
        for text in row:
            # Mix in markup the way the published pages do
            cells.append(f"<td>\n  <b>{text}</b> </td>" if index % 7 == 0 else f"<td>{text}</td>")
        parts.append("<tr>" + "".join(cells) + "</tr>")
        if index and index % 25 == 0:
            parts.append('<tr><td colspan="9">&nbsp;</td></tr>')
    parts.append("</table>")
    if decorations:
        parts.append("<table><tr><td>1</td><td>Footnote</td></tr><tr><td>2</td><td>Source</td></tr></table>")
    parts.append("</body></html>")
    return "\n".join(parts)


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Factory for a synthetic life-table page with ``ages`` data rows."""

    def _make(ages: int = 101, **kwargs) -> str:
        return render_page(data_rows(ages), **kwargs)

    return _make


@pytest.fixture
def make_rows() -> Callable[[int], list[list[str]]]:
    """Factory for normalized cell texts (thousands separators removed)."""

    def _make(ages: int = 101) -> list[list[str]]:
        return [[text.replace(",", "") for text in row] for row in data_rows(ages)]

    return _make


@pytest.fixture
def render() -> Callable[..., str]:
    return render_page


@pytest.fixture
def expected_male() -> Callable[[int], list[float]]:
    return lambda ages=101: [survivors(age, MALE_SPAN) / 100_000 for age in range(ages)]


@pytest.fixture
def expected_female() -> Callable[[int], list[float]]:
    return lambda ages=101: [survivors(age, FEMALE_SPAN) / 100_000 for age in range(ages)]
