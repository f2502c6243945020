"""Welford online algorithms for running mean and variance in a single pass."""

from __future__ import annotations

from typing import TypeVar

Number = TypeVar("Number", int, float)


def _is_integral(*values: object) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


def calculate_mean(prev_mean: Number, next_value: Number, count: Number) -> Number:
    """Return the next running mean.

    When every argument is an integer the step is computed with integer
    division truncating toward zero, so the result stays an integer.
    """
    if _is_integral(prev_mean, next_value, count):
        diff = next_value - prev_mean
        step = abs(diff) // abs(count)
        if (diff < 0) != (count < 0):
            step = -step
        return prev_mean + step
    return prev_mean + (next_value - prev_mean) / count


def calculate_recurrence_relation_m(
    prev_m: float, prev_mean: float, new_value: float, new_mean: float
) -> float:
    """Return the next Welford recurrence relation M."""
    return prev_m + ((new_value - prev_mean) * (new_value - new_mean))


def calculate_sample_variance(recurrence_relation_m: float, count: int) -> float:
    """Return the unbiased sample variance (Bessel's correction, count - 1)."""
    if count < 2:
        return 0.0
    return recurrence_relation_m / (float(count) - 1.0)


def calculate_population_variance(recurrence_relation_m: float, count: int) -> float:
    """Return the biased population variance."""
    if count < 1:
        return 0.0
    return recurrence_relation_m / float(count)