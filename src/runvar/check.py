from __future__ import annotations

from .error import RunvarError, for_context
from .math.accumulator import NATIVE_FLOAT_DTYPES, numeric_dtype
from .math.variance import parse_variance_type
from .options.config import Config
from .util.files import check_file_exists, check_parent_dir_exists


def check_config(config: Config) -> None:
    parse_variance_type(config.stats.variance_type)
    try:
        input_dtype = numeric_dtype(config.stats.input_type)
    except RunvarError as exc:
        raise for_context("stats.input_type", exc) from exc
    if config.stats.calc_type is None:
        return
    try:
        calc_dtype = numeric_dtype(config.stats.calc_type)
    except RunvarError as exc:
        raise for_context("stats.calc_type", exc) from exc
    if input_dtype in NATIVE_FLOAT_DTYPES and calc_dtype != input_dtype:
        print(
            f"Note: {input_dtype.name} values are summed as {input_dtype.name}; "
            f"calc_type {calc_dtype.name} is ignored."
        )


def check_prerequisites(config: Config) -> None:
    check_file_exists(config.files.input)
    if config.files.out_file:
        check_parent_dir_exists(config.files.out_file)
