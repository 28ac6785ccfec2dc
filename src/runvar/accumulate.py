from __future__ import annotations

from typing import Optional

from .data import read_values
from .error import for_context
from .math.standard_deviation import StandardDeviation
from .math.variance import RunningStatistic, Variance, VarianceType
from .options.action import Action
from .options.config import Config, config_to_toml
from .report import Summary, write_summary


def new_engine(action: Action, config: Config) -> RunningStatistic:
    engine_class = StandardDeviation if action == Action.STDDEV else Variance
    return engine_class(
        config.stats.variance_type,
        input_type=config.stats.input_type,
        calc_type=config.stats.calc_type,
    )


def accumulate(action: Action, config: Config) -> Summary:
    engine = new_engine(action, config)
    try:
        engine.add(read_values(config.files.input, engine.state.input_dtype))
    except Exception as exc:
        raise for_context(f"Reading {config.files.input}", exc) from exc
    if engine.count() == 1 and engine.variance_type is VarianceType.SAMPLE:
        print("Warning: sample variance of a single value divides by zero.")
    return Summary.from_engine(action.value, engine)


def accumulate_or_check(action: Action, config: Config, dry: bool) -> Optional[Summary]:
    print(config_to_toml(config).rstrip())
    if dry:
        print("User picked dry run only, so doing nothing.")
        return None
    summary = accumulate(action, config)
    print(summary)
    if config.files.out_file:
        write_summary(config.files.out_file, summary)
        print(f"Wrote summary to {config.files.out_file}")
    return summary
