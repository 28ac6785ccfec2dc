from __future__ import annotations

from dataclasses import dataclass


class ErrorKind:
    RUNVAR = "Runvar error"
    IO = "I/O error"
    TOML_DE = "TOML deserialization error"
    TOML_SER = "TOML serialization error"
    PARSE_FLOAT = "parse float error"


@dataclass
class RunvarError(Exception):
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


def new_error(message: str) -> RunvarError:
    return RunvarError(ErrorKind.RUNVAR, message)


def for_file(file: str, exc: Exception) -> RunvarError:
    return RunvarError(ErrorKind.IO, f"{file}: {exc}")


def for_context(context: str, exc: Exception) -> RunvarError:
    if isinstance(exc, RunvarError):
        return RunvarError(exc.kind, f"{context}: {exc.message}")
    return RunvarError(ErrorKind.RUNVAR, f"{context}: {exc}")
