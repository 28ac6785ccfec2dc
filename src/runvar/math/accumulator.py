from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..error import new_error

# Inputs of these types keep their own precision for the running sums.
NATIVE_FLOAT_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def numeric_dtype(value: Any) -> np.dtype:
    try:
        dtype = np.dtype(value)
    except TypeError as exc:
        raise new_error(f"Unknown numeric type '{value}'.") from exc
    if dtype.kind not in "iuf":
        raise new_error(f"Type '{value}' is not an integer or floating point type.")
    return dtype


def storage_dtype(input_type: Any, calc_type: Any = None) -> np.dtype:
    """Dtype of the running sums for the given input and calc types.

    Single and double precision inputs always accumulate in their own type,
    whatever calc type is requested. Every other input type accumulates in
    the calc type, or in the input type when no calc type is given.
    """
    input_dtype = numeric_dtype(input_type)
    if input_dtype in NATIVE_FLOAT_DTYPES or calc_type is None:
        return input_dtype
    return numeric_dtype(calc_type)


@dataclass
class AccumulatorState:
    input_dtype: np.dtype
    storage: np.dtype
    sum: np.generic
    sum_of_squares: np.generic
    counter: int = 0

    @classmethod
    def new(cls, input_type: Any = np.float64, calc_type: Any = None) -> "AccumulatorState":
        input_dtype = numeric_dtype(input_type)
        storage = storage_dtype(input_dtype, calc_type)
        return cls(
            input_dtype=input_dtype,
            storage=storage,
            sum=storage.type(0),
            sum_of_squares=storage.type(0),
        )

    def clear(self) -> None:
        self.sum = self.storage.type(0)
        self.sum_of_squares = self.storage.type(0)
        self.counter = 0

    def add(self, value: Any) -> None:
        # Squared and summed in the storage type; integer sums wrap on overflow.
        x = self.storage.type(self.input_dtype.type(value))
        with np.errstate(over="ignore"):
            self.sum_of_squares += x * x
            self.sum += x
        self.counter += 1

    def count(self) -> int:
        return self.counter
