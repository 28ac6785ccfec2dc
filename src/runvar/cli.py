from __future__ import annotations

from .accumulate import accumulate_or_check
from .check import check_config, check_prerequisites
from .error import RunvarError
from .options.cli import get_choice, resolve_config


def run(argv: list[str] | None = None) -> None:
    options = get_choice(argv)
    config = resolve_config(options)
    check_config(config)
    check_prerequisites(config)
    accumulate_or_check(options.action, config, options.dry)


def main(argv: list[str] | None = None) -> None:
    try:
        run(argv)
        print("Done!")
    except RunvarError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1) from exc
