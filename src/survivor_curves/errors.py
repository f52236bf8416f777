"""Error taxonomy for life-table extraction.

Every error here is fatal for the whole batch: the aggregator never catches
and continues, so a malformed page means the extraction heuristics need a
look rather than a retry.
"""
from __future__ import annotations


class LifeTableError(Exception):
    """Base exception for every failure in a survivor-curve run."""

    def __init__(self, message: str, *, year: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.year = year

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        prefix = f"{self.year}: " if self.year is not None else ""
        return f"{prefix}{self.kind}: {self.message}"


# =============================================================================
# Page extraction errors
# =============================================================================

class ExtractionError(LifeTableError):
    """Base exception for errors raised while parsing one page."""


class NoTableFound(ExtractionError):
    """Raised when the document contains no <table> element."""


class TooManyMatchingColumns(ExtractionError):
    """Raised when a row holds more than two "100000" cells."""


class AsymmetricColumns(ExtractionError):
    """Raised when a male survivor column is found without a female one."""


class MissingRowNumberColumn(ExtractionError):
    """Raised when survivor columns are found but no "0" row-number cell."""


class MalformedCellValue(ExtractionError):
    """Raised when a survivor cell of a data row is not a non-negative integer."""

    def __init__(self, column: str, row_number: int, text: str, *, year: int | None = None) -> None:
        super().__init__(
            f"{column} cell at row {row_number} is not a count: {text!r}",
            year=year,
        )
        self.column = column
        self.row_number = row_number
        self.text = text


class ValueOutOfRange(ExtractionError):
    """Raised when a normalized survivor fraction exceeds 1.0."""


class NonMonotonicSequence(ExtractionError):
    """Raised when survivors increase from one age to the next."""


class InsufficientRows(ExtractionError):
    """Raised when a page yields too few ages to be a life table."""


# =============================================================================
# Transport errors
# =============================================================================

class FetchFailed(LifeTableError):
    """Raised when a page cannot be retrieved (timeout, DNS, non-2xx, reset)."""

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: int | None = None,
        *,
        year: int | None = None,
    ) -> None:
        super().__init__(f"GET {url} failed: {reason}", year=year)
        self.url = url
        self.status_code = status_code
