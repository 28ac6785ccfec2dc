from __future__ import annotations

import gzip
import io
import re
from typing import Any, Iterator

import numpy as np

from ..error import ErrorKind, RunvarError, for_file
from ..math.accumulator import numeric_dtype

_SEPARATORS = re.compile(r"[\s,;]+")


def _open_text(path: str) -> io.TextIOBase:
    if path.startswith("file://"):
        path = path[len("file://") :]
    try:
        raw = open(path, "rb")
    except OSError as exc:
        raise for_file(path, exc) from exc
    magic = raw.read(2)
    raw.seek(0)
    if magic == b"\x1f\x8b":
        raw.close()
        return gzip.open(path, "rt", encoding="utf-8")
    return io.TextIOWrapper(raw, encoding="utf-8")


def _split_tokens(line: str) -> list[str]:
    line = line.split("#", 1)[0].strip()
    if not line:
        return []
    return [token for token in _SEPARATORS.split(line) if token]


def parse_value(token: str, dtype: np.dtype) -> np.generic:
    if dtype.kind == "f":
        return dtype.type(float(token))
    return dtype.type(int(token))


def read_values(path: str, input_type: Any = np.float64) -> Iterator[np.generic]:
    """Yields the observations in a text file, in file order."""
    dtype = numeric_dtype(input_type)
    with _open_text(path) as handle:
        for i_line, line in enumerate(handle, start=1):
            for token in _split_tokens(line):
                try:
                    value = parse_value(token, dtype)
                except (ValueError, OverflowError) as exc:
                    raise RunvarError(
                        ErrorKind.PARSE_FLOAT,
                        f"{path}, line {i_line}: cannot parse '{token}' as {dtype.name}: {exc}",
                    ) from exc
                yield value
