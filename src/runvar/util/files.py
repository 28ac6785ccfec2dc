from __future__ import annotations

from pathlib import Path

from ..error import new_error


def check_file_exists(path: str) -> None:
    if path.startswith("file://"):
        path = path[len("file://") :]
    if not Path(path).is_file():
        raise new_error(f"File {path} does not exist")


def check_parent_dir_exists(path: str) -> None:
    parent = Path(path).parent
    if str(parent) != "" and not parent.exists():
        raise new_error(f"Directory {parent} does not exist")
