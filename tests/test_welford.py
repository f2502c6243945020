import pytest

from tearsheet.welford import (
    calculate_mean,
    calculate_population_variance,
    calculate_recurrence_relation_m,
    calculate_sample_variance,
)


@pytest.mark.parametrize(
    "prev_mean, next_value, count, expected",
    [
        (0.0, 0.1, 1.0, 0.1),
        (0.1, -0.2, 2.0, -0.05),
        (-0.05, -0.05, 3.0, -0.05),
        (-0.05, 0.2, 4.0, 0.0125),
        (0.0125, 0.15, 5.0, 0.04),
    ],
)
def test_calculate_mean(prev_mean, next_value, count, expected):
    assert calculate_mean(prev_mean, next_value, count) == pytest.approx(expected, abs=1e-10)


def test_calculate_mean_integers_truncate_toward_zero():
    assert calculate_mean(0, 5, 2) == 2
    assert calculate_mean(0, -5, 2) == -2
    assert isinstance(calculate_mean(0, 5, 2), int)


@pytest.mark.parametrize(
    "prev_m, prev_mean, new_value, new_mean, expected",
    [
        (0.0, 0.0, 10.0, 10.0, 0.0),
        (0.0, 10.0, 100.0, 55.0, 4050.0),
        (4050.0, 55.0, -10.0, 100.0 / 3.0, 20600.0 / 3.0),
        (0.0, 0.0, -5.0, -5.0, 0.0),
        (0.0, -5.0, -50.0, -55.0 / 2.0, 1012.5),
        (1012.5, -55.0 / 2.0, -1000.0, -1055.0 / 3.0, 1894550.0 / 3.0),
        (0.0, 0.0, 90000.0, 90000.0, 0.0),
        (0.0, 90000.0, -90000.0, 0.0, 16200000000.0),
        (16200000000.0, 0.0, 0.0, 0.0, 16200000000.0),
    ],
)
def test_calculate_recurrence_relation_m(prev_m, prev_mean, new_value, new_mean, expected):
    assert calculate_recurrence_relation_m(prev_m, prev_mean, new_value, new_mean) == expected


@pytest.mark.parametrize(
    "m, count, expected",
    [
        (0.0, 1, 0.0),
        (1050.0, 5, 262.5),
        (1012.5, 123223, 675.0 / 82148.0),
        (16200000000.0, 3, 8100000000.0),
        (99999.9999, 23232, 4.304592996427187),
    ],
)
def test_calculate_sample_variance(m, count, expected):
    assert calculate_sample_variance(m, count) == expected


@pytest.mark.parametrize(
    "m, count, expected",
    [
        (0.0, 1, 0.0),
        (1050.0, 5, 210.0),
        (1012.5, 123223, 1012.5 / 123223.0),
        (16200000000.0, 3, 5400000000.0),
        (99999.9999, 23232, 4.304407709194215),
    ],
)
def test_calculate_population_variance(m, count, expected):
    assert calculate_population_variance(m, count) == expected


def test_population_variance_zero_count_is_zero():
    assert calculate_population_variance(123.0, 0) == 0.0