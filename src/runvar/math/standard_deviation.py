from __future__ import annotations

import math

from .variance import RunningStatistic, VarianceType

StandardDeviationType = VarianceType


def floored_sqrt(variance: float) -> float:
    # Also maps NaN to 0.0.
    if variance > 0:
        return math.sqrt(variance)
    return 0.0


class StandardDeviation(RunningStatistic):
    """Running standard deviation, the floored square root of the variance."""

    def derive(self, variance: float) -> float:
        return floored_sqrt(variance)

    def get_standard_deviation(self) -> float:
        return float(self)
