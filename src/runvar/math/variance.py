from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterable

import numpy as np

from ..error import new_error
from .accumulator import AccumulatorState


class VarianceType(Enum):
    SAMPLE = "sample"
    POPULATION = "population"

    @property
    def adjustment(self) -> int:
        return 0 if self is VarianceType.POPULATION else 1


class CacheState(Enum):
    STALE = "stale"
    FRESH = "fresh"


def parse_variance_type(value: Any) -> VarianceType:
    if isinstance(value, VarianceType):
        return value
    try:
        return VarianceType(str(value).lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in VarianceType)
        raise new_error(f"Unknown variance type '{value}' (expected one of {choices}).") from exc


def compute_variance(total: Any, sum_of_squares: Any, count: int, adjustment: int) -> float:
    """Bias-corrected variance from running sums.

    Returns 0.0 for an empty accumulator. With ``adjustment == 1`` and a
    single observation the divisor is zero and the IEEE result (NaN) is
    returned as is.
    """
    if count == 0:
        return 0.0
    n = np.float64(count)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        scale = np.float64(1.0) / (n * (n - adjustment))
        # Squared in the storage type of the sums.
        square_of_sum = np.float64(total * total)
        return float((n * np.float64(sum_of_squares) - square_of_sum) * scale)


def _is_iterable(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, Iterable)


class RunningStatistic(ABC):
    """Running sums plus a lazily recomputed (variance, derived value) pair.

    Every mutation marks the cache stale; every query on a stale cache
    recomputes both values from the running sums.
    """

    def __init__(
        self,
        variance_type: VarianceType | str = VarianceType.SAMPLE,
        values: Iterable[Any] | None = None,
        *,
        input_type: Any = np.float64,
        calc_type: Any = None,
    ) -> None:
        self.variance_type = parse_variance_type(variance_type)
        self.state = AccumulatorState.new(input_type, calc_type)
        self.cache_state = CacheState.STALE
        self._variance_value = 0.0
        self._derived_value = 0.0
        if values is not None:
            self.add(values)

    @abstractmethod
    def derive(self, variance: float) -> float:
        """Final transform applied to a freshly computed variance."""

    def add(self, value: Any) -> None:
        if _is_iterable(value):
            items = value.ravel() if isinstance(value, np.ndarray) else value
            for item in items:
                self._add_one(item)
        else:
            self._add_one(value)

    def __call__(self, value: Any) -> None:
        self.add(value)

    def _add_one(self, value: Any) -> None:
        self.state.add(value)
        self.cache_state = CacheState.STALE

    def clear(self) -> None:
        self.state.clear()
        self.cache_state = CacheState.STALE

    def count(self) -> int:
        return self.state.count()

    def _calculate(self) -> None:
        if self.cache_state is CacheState.FRESH:
            return
        state = self.state
        self._variance_value = compute_variance(
            state.sum, state.sum_of_squares, state.counter, self.variance_type.adjustment
        )
        self._derived_value = self.derive(self._variance_value)
        self.cache_state = CacheState.FRESH

    def get_variance(self) -> float:
        self._calculate()
        return self._variance_value

    def __float__(self) -> float:
        self._calculate()
        return self._derived_value

    def __repr__(self) -> str:
        return "{}({}, n={}, input_type={}, storage={})".format(
            type(self).__name__,
            self.variance_type.value,
            self.count(),
            self.state.input_dtype.name,
            self.state.storage.name,
        )


class Variance(RunningStatistic):
    """Running variance. Negative results from cancellation are not clamped."""

    def derive(self, variance: float) -> float:
        return variance
