"""Runtime settings for a survivor-curve batch.

Values come from the environment (optionally a .env file). Every batch
parameter can be overridden from the CLI.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .logging import LOG_LEVELS

DEFAULT_URL_TEMPLATE = "https://www.ssa.gov/oact/NOTES/as120/LifeTables_Tbl_7_{year}.html"
DEFAULT_OUTPUT = "fileTables.json"


def _f(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}") from None


def _i(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}") from None


@dataclass(frozen=True)
class Settings:
    """Batch configuration.

    Attributes:
        url_template: Page URL with a ``{year}`` placeholder
        start_year: First table year (inclusive)
        end_year: Last table year (inclusive)
        year_step: Distance between table years
        min_interval: Seconds between consecutive requests
        timeout_seconds: HTTP timeout per request
        output_path: Where the JSON dataset is written
        user_agent: User-Agent header sent with each request
        log_level: structlog filtering level
    """

    url_template: str = DEFAULT_URL_TEMPLATE
    start_year: int = 1900
    end_year: int = 2100
    year_step: int = 10
    min_interval: float = 0.5
    timeout_seconds: float = 30.0
    output_path: Path = Path(DEFAULT_OUTPUT)
    user_agent: str = f"survivor-curves/{__version__}"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if "{year}" not in self.url_template:
            raise ValueError(f"url_template must contain '{{year}}', got: {self.url_template}")
        if self.year_step <= 0:
            raise ValueError(f"year_step must be positive, got: {self.year_step}")
        if self.start_year > self.end_year:
            raise ValueError(
                f"start_year ({self.start_year}) must not be after end_year ({self.end_year})"
            )
        if self.min_interval < 0:
            raise ValueError(f"min_interval must be non-negative, got: {self.min_interval}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got: {self.timeout_seconds}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got: {self.log_level}")

    def override(self, **changes: object) -> "Settings":
        """Return a copy with the non-None changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Load settings from LIFETABLE_* environment variables.

        Raises:
            ValueError: If a numeric variable does not parse or a value is invalid
        """
        if dotenv:
            load_dotenv()
        defaults = cls()
        return cls(
            url_template=os.getenv("LIFETABLE_URL_TEMPLATE") or defaults.url_template,
            start_year=_i("LIFETABLE_START_YEAR", defaults.start_year),
            end_year=_i("LIFETABLE_END_YEAR", defaults.end_year),
            year_step=_i("LIFETABLE_YEAR_STEP", defaults.year_step),
            min_interval=_f("LIFETABLE_MIN_INTERVAL", defaults.min_interval),
            timeout_seconds=_f("LIFETABLE_TIMEOUT", defaults.timeout_seconds),
            output_path=Path(os.getenv("LIFETABLE_OUTPUT") or defaults.output_path),
            user_agent=os.getenv("LIFETABLE_USER_AGENT") or defaults.user_agent,
            log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
        )
