from __future__ import annotations

import argparse
from dataclasses import dataclass, replace

from ..error import new_error, RunvarError
from .action import Action
from .config import Config, load_config


@dataclass
class CoreOptions:
    action: Action
    config_file: str | None
    input_file: str | None
    out_file: str | None
    variance_type: str | None
    input_type: str | None
    calc_type: str | None
    dry: bool


def _missing_option_error(name: str, long_opt: str, short_opt: str) -> RunvarError:
    return new_error(f"Missing {name} option ('--{long_opt}' or '-{short_opt}').")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="runvar")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_core(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("-f", "--conf-file", dest="conf_file")
        sub.add_argument("-i", "--in-file", dest="in_file")
        sub.add_argument("-o", "--out-file", dest="out_file")
        sub.add_argument("-d", "--dry", action="store_true")
        mode = sub.add_mutually_exclusive_group()
        mode.add_argument(
            "--sample",
            action="store_const",
            const="sample",
            dest="variance_type",
            help="Divide by n - 1 (default).",
        )
        mode.add_argument(
            "--population",
            action="store_const",
            const="population",
            dest="variance_type",
            help="Divide by n.",
        )
        sub.add_argument("--input-type", dest="input_type", help="numpy dtype of the values.")
        sub.add_argument(
            "--calc-type",
            dest="calc_type",
            help="numpy dtype of the running sums; ignored for float32 and float64 input.",
        )

    variance = subparsers.add_parser(Action.VARIANCE.value)
    add_core(variance)

    stddev = subparsers.add_parser(Action.STDDEV.value)
    add_core(stddev)

    return parser


def get_choice(argv: list[str] | None = None) -> CoreOptions:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command not in (Action.VARIANCE.value, Action.STDDEV.value):
        raise new_error(f"Unknown subcommand {args.command}.")
    return CoreOptions(
        action=Action(args.command),
        config_file=args.conf_file,
        input_file=args.in_file,
        out_file=args.out_file,
        variance_type=args.variance_type,
        input_type=args.input_type,
        calc_type=args.calc_type,
        dry=bool(args.dry),
    )


def resolve_config(options: CoreOptions) -> Config:
    """Config file values, overridden by whatever was given on the command line."""
    config = load_config(options.config_file) if options.config_file else Config()
    files = config.files
    stats = config.stats
    if options.input_file:
        files = replace(files, input=options.input_file)
    if options.out_file:
        files = replace(files, out_file=options.out_file)
    if options.variance_type:
        stats = replace(stats, variance_type=options.variance_type)
    if options.input_type:
        stats = replace(stats, input_type=options.input_type)
    if options.calc_type:
        stats = replace(stats, calc_type=options.calc_type)
    if not files.input:
        raise _missing_option_error("input file", "in-file", "i")
    return Config(files=files, stats=stats)
