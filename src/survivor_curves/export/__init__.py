"""Export of survivor-curve datasets.

Supported formats:
- JSON: {"<year>": {"female": [...], "male": [...]}}, years ascending
"""
from __future__ import annotations

from survivor_curves.export.json_export import atomic_write, load_dataset, write_dataset

__all__ = [
    "atomic_write",
    "load_dataset",
    "write_dataset",
]
