import math

import numpy as np
import pytest

import runvar.math.variance as variance_module
from runvar.math.standard_deviation import (
    StandardDeviation,
    StandardDeviationType,
    floored_sqrt,
)
from runvar.math.variance import CacheState, VarianceType

DATA = [2, 4, 4, 4, 5, 5, 7, 9]


def test_population_standard_deviation():
    std = StandardDeviation(StandardDeviationType.POPULATION, DATA)
    assert std.get_variance() == 4.0
    assert std.get_standard_deviation() == 2.0


def test_sample_standard_deviation():
    std = StandardDeviation(StandardDeviationType.SAMPLE, DATA)
    assert std.get_variance() == pytest.approx(32.0 / 7.0)
    assert std.get_standard_deviation() == pytest.approx(math.sqrt(32.0 / 7.0))


def test_empty_standard_deviation_is_zero():
    std = StandardDeviation()
    assert std.count() == 0
    assert std.get_variance() == 0.0
    assert std.get_standard_deviation() == 0.0


def test_sample_single_value():
    std = StandardDeviation("sample", [1.25])
    assert math.isnan(std.get_variance())
    assert std.get_standard_deviation() == 0.0


def test_square_matches_floored_variance():
    rng = np.random.default_rng(42)
    std = StandardDeviation("sample")
    for value in rng.normal(0.0, 3.0, size=50):
        std.add(value)
        variance = std.get_variance()
        expected = variance if variance > 0 else 0.0
        assert std.get_standard_deviation() ** 2 == pytest.approx(expected)


def test_float_is_standard_deviation():
    std = StandardDeviation("population", DATA)
    assert float(std) == 2.0


def test_floored_sqrt():
    assert floored_sqrt(9.0) == 3.0
    assert floored_sqrt(0.0) == 0.0
    assert floored_sqrt(-1e-12) == 0.0
    assert floored_sqrt(float("nan")) == 0.0


def test_negative_variance_is_clamped():
    std = StandardDeviation("population")
    std.state.sum = np.float64(3.0)
    std.state.sum_of_squares = np.float64(2.9)
    std.state.counter = 3
    assert std.get_variance() < 0.0
    assert std.get_standard_deviation() == 0.0


def test_one_recompute_serves_both_values(monkeypatch):
    calls = []
    original = variance_module.compute_variance

    def counting(*args):
        calls.append(args)
        return original(*args)

    monkeypatch.setattr(variance_module, "compute_variance", counting)
    std = StandardDeviation("population", DATA)
    assert std.get_variance() == 4.0
    assert std.get_standard_deviation() == 2.0
    assert float(std) == 2.0
    assert len(calls) == 1
    assert std.cache_state is CacheState.FRESH
    std.add(5)
    assert std.cache_state is CacheState.STALE
    std.get_standard_deviation()
    assert len(calls) == 2


def test_clear():
    std = StandardDeviation("sample", DATA)
    std.get_standard_deviation()
    std.clear()
    assert std.count() == 0
    assert std.get_standard_deviation() == 0.0


def test_type_alias():
    assert StandardDeviationType is VarianceType
