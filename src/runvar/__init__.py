from .error import ErrorKind, RunvarError
from .math.accumulator import AccumulatorState, storage_dtype
from .math.standard_deviation import StandardDeviation, StandardDeviationType, floored_sqrt
from .math.variance import CacheState, RunningStatistic, Variance, VarianceType, compute_variance

__all__ = [
    "AccumulatorState",
    "CacheState",
    "ErrorKind",
    "RunningStatistic",
    "RunvarError",
    "StandardDeviation",
    "StandardDeviationType",
    "Variance",
    "VarianceType",
    "compute_variance",
    "floored_sqrt",
    "storage_dtype",
]
