"""Data models for survivor curves and their column layout."""

from .columns import ColumnIndices
from .curve import MIN_AGES, NORMALIZATION_BASE, SurvivorCurve
from .dataset import YearlyDataset

__all__ = [
    "ColumnIndices",
    "SurvivorCurve",
    "YearlyDataset",
    "MIN_AGES",
    "NORMALIZATION_BASE",
]
