"""Table locator: the data table is the one with the most rows."""
from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ..errors import NoTableFound
from .text import cell_text


def locate_table(soup: BeautifulSoup) -> Tag:
    """Return the table with the most <tr> elements.

    Ties go to the table that appears first in the document.

    Raises:
        NoTableFound: If the document has no tables at all
    """
    tables = soup.find_all("table")
    if not tables:
        raise NoTableFound("document contains no <table> elements")
    # max() keeps the first of equal keys
    return max(tables, key=lambda table: len(table.find_all("tr")))


def table_rows(table: Tag) -> list[list[str]]:
    """Normalized <td> texts for each <tr> of the table, in document order."""
    return [[cell_text(td) for td in tr.find_all("td")] for tr in table.find_all("tr")]
