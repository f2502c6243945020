"""Measures of dispersion: range, variance and standard deviation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tearsheet import welford


@dataclass
class Range:
    """Highest and lowest value of a dataset; the spread is computed lazily."""

    activated: bool = False
    high: float = 0.0
    low: float = 0.0

    @classmethod
    def from_first_value(cls, first_value: float) -> "Range":
        """Create a range seeded with the first value of a dataset."""
        return cls(activated=False, high=first_value, low=first_value)

    def update(self, new_value: float) -> None:
        """Fold the next value of the dataset into the range."""
        if not self.activated:
            self.activated = True
            self.high = new_value
            self.low = new_value
            return
        if new_value > self.high:
            self.high = new_value
        if new_value < self.low:
            self.low = new_value

    def calculate(self) -> float:
        """Return the distance between the highest and lowest value."""
        return self.high - self.low


@dataclass
class Dispersion:
    """A dataset described by its range, variance and standard deviation."""

    range: Range = field(default_factory=Range)
    recurrence_relation_m: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0

    def update(
        self, prev_mean: float, new_mean: float, new_value: float, value_count: int
    ) -> None:
        """Update every measure with the next value and the running means."""
        self.range.update(new_value)
        self.recurrence_relation_m = welford.calculate_recurrence_relation_m(
            self.recurrence_relation_m, prev_mean, new_value, new_mean
        )
        self.variance = welford.calculate_population_variance(
            self.recurrence_relation_m, value_count
        )
        self.std_dev = math.sqrt(self.variance)