"""Survivor Curves - life-table survivor extraction.

Scrapes the published cohort life tables (one HTML page per decade year),
infers the survivor columns from their sentinel values and emits a single
JSON dataset of male/female survivor fractions keyed by year.
"""

__version__ = "0.1.0"


# Lazy imports keep `import survivor_curves` free of bs4/httpx
def __getattr__(name: str):
    if name == "extraction":
        from survivor_curves import extraction
        return extraction
    if name == "models":
        from survivor_curves import models
        return models
    if name == "export":
        from survivor_curves import export
        return export
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
