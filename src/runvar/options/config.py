from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib
import tomli_w

from ..error import RunvarError, ErrorKind

DEFAULT_VARIANCE_TYPE = "sample"
DEFAULT_INPUT_TYPE = "float64"


@dataclass
class FilesConfig:
    input: str = ""
    out_file: Optional[str] = None


@dataclass
class StatsConfig:
    variance_type: str = DEFAULT_VARIANCE_TYPE
    input_type: str = DEFAULT_INPUT_TYPE
    calc_type: Optional[str] = None


@dataclass
class Config:
    files: FilesConfig = field(default_factory=FilesConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)


def load_config(path: str) -> Config:
    try:
        with open(path, "rb") as handle:
            data = tomllib.load(handle)
    except Exception as exc:
        raise RunvarError(ErrorKind.TOML_DE, f"{path}: {exc}") from exc

    files_data = data.get("files", {})
    files = FilesConfig(
        input=str(files_data.get("input", "")),
        out_file=files_data.get("out_file"),
    )
    stats_data = data.get("stats", {})
    calc_type = stats_data.get("calc_type")
    stats = StatsConfig(
        variance_type=str(stats_data.get("variance_type", DEFAULT_VARIANCE_TYPE)),
        input_type=str(stats_data.get("input_type", DEFAULT_INPUT_TYPE)),
        calc_type=str(calc_type) if calc_type is not None else None,
    )
    return Config(files=files, stats=stats)


def config_to_toml(config: Config) -> str:
    files = {"input": config.files.input}
    if config.files.out_file:
        files["out_file"] = config.files.out_file
    stats = {
        "variance_type": config.stats.variance_type,
        "input_type": config.stats.input_type,
    }
    if config.stats.calc_type is not None:
        stats["calc_type"] = config.stats.calc_type
    try:
        return tomli_w.dumps({"files": files, "stats": stats})
    except Exception as exc:
        raise RunvarError(ErrorKind.TOML_SER, str(exc)) from exc
