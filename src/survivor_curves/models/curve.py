"""Survivor curve model."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Published tables assume a cohort of 100,000 births at age 0
NORMALIZATION_BASE = 100_000

# A life table must cover more than this many ages
MIN_AGES = 50


class SurvivorCurve(BaseModel):
    """Fraction of the initial cohort still alive at each age, by sex."""

    model_config = ConfigDict(frozen=True)

    male: tuple[float, ...] = Field(description="Male survivor fraction per age, ascending age")
    female: tuple[float, ...] = Field(description="Female survivor fraction per age, ascending age")

    @field_validator("male", "female")
    @classmethod
    def _check_fractions(cls, values: tuple[float, ...]) -> tuple[float, ...]:
        previous = None
        for age, value in enumerate(values):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"value {value} at age {age} is outside [0, 1]")
            if previous is not None and value > previous:
                raise ValueError(f"value increases at age {age}: {previous} -> {value}")
            previous = value
        return values

    @model_validator(mode="after")
    def _check_lengths(self) -> "SurvivorCurve":
        if len(self.male) != len(self.female):
            raise ValueError(
                f"male and female lengths differ: {len(self.male)} != {len(self.female)}"
            )
        if len(self.male) <= MIN_AGES:
            raise ValueError(f"curve covers {len(self.male)} ages, need more than {MIN_AGES}")
        return self

    @property
    def ages(self) -> int:
        return len(self.male)

    def survival_at(self, age: int) -> tuple[float, float]:
        """Return (male, female) survivor fractions at the given age."""
        if not 0 <= age < self.ages:
            raise IndexError(f"age {age} outside table (0..{self.ages - 1})")
        return self.male[age], self.female[age]
