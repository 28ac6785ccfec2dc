from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import tomli_w

from .error import RunvarError, ErrorKind
from .math.standard_deviation import StandardDeviation
from .math.variance import RunningStatistic


@dataclass
class Summary:
    statistic: str
    variance_type: str
    input_type: str
    storage_type: str
    count: int
    variance: float
    standard_deviation: Optional[float] = None

    @classmethod
    def from_engine(cls, statistic: str, engine: RunningStatistic) -> "Summary":
        standard_deviation = None
        if isinstance(engine, StandardDeviation):
            standard_deviation = engine.get_standard_deviation()
        return cls(
            statistic=statistic,
            variance_type=engine.variance_type.value,
            input_type=engine.state.input_dtype.name,
            storage_type=engine.state.storage.name,
            count=engine.count(),
            variance=engine.get_variance(),
            standard_deviation=standard_deviation,
        )

    def to_dict(self) -> dict:
        data = {
            "statistic": self.statistic,
            "variance_type": self.variance_type,
            "input_type": self.input_type,
            "storage_type": self.storage_type,
            "count": self.count,
            "variance": self.variance,
        }
        if self.standard_deviation is not None:
            data["standard_deviation"] = self.standard_deviation
        return data

    def __str__(self) -> str:
        lines = [
            f"{self.variance_type} {self.statistic} of {self.count} values "
            f"({self.input_type} summed as {self.storage_type})",
            f"variance: {self.variance}",
        ]
        if self.standard_deviation is not None:
            lines.append(f"standard deviation: {self.standard_deviation}")
        return "\n".join(lines)


def write_summary(path: str, summary: Summary) -> None:
    try:
        text = tomli_w.dumps(summary.to_dict())
    except Exception as exc:
        raise RunvarError(ErrorKind.TOML_SER, str(exc)) from exc
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise RunvarError(ErrorKind.IO, f"{path}: {exc}") from exc
