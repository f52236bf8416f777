"""Yearly dataset of survivor curves."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .curve import SurvivorCurve


class YearlyDataset(BaseModel):
    """Survivor curves keyed by table year.

    Built one year at a time by the aggregator and handed whole to the
    serializer once every year has succeeded.
    """

    curves: dict[int, SurvivorCurve] = Field(default_factory=dict)

    def add(self, year: int, curve: SurvivorCurve) -> None:
        if year in self.curves:
            raise ValueError(f"year {year} already present in dataset")
        self.curves[year] = curve

    def years(self) -> list[int]:
        return sorted(self.curves)

    def __len__(self) -> int:
        return len(self.curves)

    def __contains__(self, year: object) -> bool:
        return year in self.curves

    def __getitem__(self, year: int) -> SurvivorCurve:
        return self.curves[year]

    def to_json_dict(self) -> dict[str, dict[str, list[float]]]:
        """Render as {"<year>": {"female": [...], "male": [...]}} in ascending year order."""
        return {
            str(year): {
                "female": list(self.curves[year].female),
                "male": list(self.curves[year].male),
            }
            for year in self.years()
        }

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "YearlyDataset":
        """Rebuild a dataset from ``to_json_dict`` output.

        Raises:
            ValueError: If a key is not a year or an entry lacks valid curves
        """
        dataset = cls()
        for key, value in data.items():
            try:
                year = int(key)
            except ValueError:
                raise ValueError(f"dataset key {key!r} is not a year") from None
            if not isinstance(value, dict) or not {"male", "female"} <= value.keys():
                raise ValueError(f"year {key}: expected an object with 'male' and 'female' curves")
            dataset.add(year, SurvivorCurve(male=value["male"], female=value["female"]))
        return dataset
