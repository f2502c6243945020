import math

import pytest

from tearsheet.dispersion import Dispersion, Range


def test_update_dispersion():
    dispersion = Dispersion()
    inputs = [
        (0.0, 1.1, 1.1, 1),
        (1.1, 1.15, 1.2, 2),
        (1.15, 1.2, 1.3, 3),
        (1.2, 1.25, 1.4, 4),
        (1.25, 1.12, 0.6, 5),
    ]
    outputs = [
        (Range(True, 1.1, 1.1), 0.0, 0.0, 0.0),
        (Range(True, 1.2, 1.1), 0.005, 0.0025, 0.05),
        (Range(True, 1.3, 1.1), 0.02, 1.0 / 150.0, math.sqrt(6.0) / 30.0),
        (Range(True, 1.4, 1.1), 0.05, 0.0125, math.sqrt(5.0) / 20.0),
        (Range(True, 1.4, 0.6), 0.388, 0.0776, math.sqrt(194.0) / 50.0),
    ]
    for (prev_mean, new_mean, new_value, count), expected in zip(inputs, outputs):
        dispersion.update(prev_mean, new_mean, new_value, count)
        exp_range, exp_m, exp_var, exp_std = expected
        assert dispersion.range == exp_range
        assert dispersion.recurrence_relation_m == pytest.approx(exp_m, abs=1e-10)
        assert dispersion.variance == pytest.approx(exp_var, abs=1e-10)
        assert dispersion.std_dev == pytest.approx(exp_std, abs=1e-10)


def test_update_range():
    dataset = [0.1, 1.01, 1.02, 1.03, 1.04, 1.05, 1.06, 1.07, 9999.0]
    actual = Range()
    for value in dataset:
        actual.update(value)
    assert actual == Range(activated=True, high=9999.0, low=0.1)
    assert actual.calculate() == 9998.9


def test_range_from_first_value_is_not_activated():
    seeded = Range.from_first_value(5.0)
    assert seeded == Range(activated=False, high=5.0, low=5.0)
    seeded.update(2.0)
    assert seeded == Range(activated=True, high=2.0, low=2.0)


def test_default_dispersions_are_independent():
    first = Dispersion()
    second = Dispersion()
    first.update(0.0, 3.0, 3.0, 1)
    assert second.range.activated is False
    assert first.range.high == 3.0