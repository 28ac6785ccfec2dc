import math
import os
import subprocess
import sys
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib

ROOT = Path(__file__).resolve().parents[1]


def _run(args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    return subprocess.run(
        [sys.executable, "-m", "runvar", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
    )


def _write_values(path: Path) -> None:
    path.write_text("2 4 4 4\n5 5 7 9\n", encoding="utf-8")


def test_population_variance(tmp_path: Path):
    _write_values(tmp_path / "values.txt")
    result = _run(["variance", "-i", "values.txt", "--population"], tmp_path)
    assert result.returncode == 0, result.stdout + result.stderr
    assert "variance: 4.0" in result.stdout
    assert "Done!" in result.stdout


def test_stddev_writes_summary(tmp_path: Path):
    _write_values(tmp_path / "values.txt")
    (tmp_path / "config.toml").write_text(
        "[files]\n"
        'input = "values.txt"\n'
        'out_file = "out/summary.toml"\n\n'
        "[stats]\n"
        'variance_type = "population"\n'
        'input_type = "int16"\n'
        'calc_type = "float64"\n',
        encoding="utf-8",
    )
    (tmp_path / "out").mkdir()
    result = _run(["stddev", "-f", "config.toml"], tmp_path)
    assert result.returncode == 0, result.stdout + result.stderr
    with (tmp_path / "out" / "summary.toml").open("rb") as handle:
        summary = tomllib.load(handle)
    assert summary["statistic"] == "stddev"
    assert summary["variance_type"] == "population"
    assert summary["storage_type"] == "float64"
    assert summary["count"] == 8
    assert summary["variance"] == 4.0
    assert summary["standard_deviation"] == 2.0


def test_single_sample_value_writes_nan(tmp_path: Path):
    (tmp_path / "values.txt").write_text("3.0\n", encoding="utf-8")
    result = _run(["variance", "-i", "values.txt", "-o", "summary.toml"], tmp_path)
    assert result.returncode == 0, result.stdout + result.stderr
    assert "Warning: sample variance of a single value" in result.stdout
    with (tmp_path / "summary.toml").open("rb") as handle:
        summary = tomllib.load(handle)
    assert summary["count"] == 1
    assert math.isnan(summary["variance"])


def test_dry_run(tmp_path: Path):
    _write_values(tmp_path / "values.txt")
    result = _run(["variance", "-i", "values.txt", "-o", "summary.toml", "--dry"], tmp_path)
    assert result.returncode == 0, result.stdout + result.stderr
    assert "dry run" in result.stdout
    assert 'input = "values.txt"' in result.stdout
    assert not (tmp_path / "summary.toml").exists()


def test_missing_input_file(tmp_path: Path):
    result = _run(["variance", "-i", "missing.txt"], tmp_path)
    assert result.returncode == 1
    assert "Error:" in result.stdout
    assert "missing.txt" in result.stdout


def test_unparsable_value(tmp_path: Path):
    (tmp_path / "values.txt").write_text("1\n2\nabc\n", encoding="utf-8")
    result = _run(["stddev", "-i", "values.txt"], tmp_path)
    assert result.returncode == 1
    assert "parse float error" in result.stdout
