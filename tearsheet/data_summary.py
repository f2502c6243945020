"""Running count, sum, mean and dispersion of a stream of values."""

from __future__ import annotations

from dataclasses import dataclass, field

from tearsheet import welford
from tearsheet.dispersion import Dispersion
from tearsheet.table import TableBuilder, format_decimal


@dataclass
class DataSummary(TableBuilder):
    """Summary statistics of a dataset, updated one value at a time."""

    count: int = 0
    sum: float = 0.0
    mean: float = 0.0
    dispersion: Dispersion = field(default_factory=Dispersion)

    def update(self, next_value: float) -> None:
        """Fold the next value into the summary."""
        self.count += 1
        self.sum += next_value
        prev_mean = self.mean
        self.mean = welford.calculate_mean(self.mean, next_value, float(self.count))
        self.dispersion.update(prev_mean, self.mean, next_value, self.count)

    def titles(self) -> list[str]:
        return [
            "Count",
            "Sum",
            "Mean",
            "Variance",
            "Std. Dev",
            "Range High",
            "Range Low",
        ]

    def row(self) -> list[str]:
        return [
            str(self.count),
            format_decimal(self.sum),
            format_decimal(self.mean),
            format_decimal(self.dispersion.variance),
            format_decimal(self.dispersion.std_dev),
            format_decimal(self.dispersion.range.high),
            format_decimal(self.dispersion.range.low),
        ]