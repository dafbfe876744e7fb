"""CLI entrypoint for rlparse."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, ParserConfig, load_config
from .loader import FileUnreadable
from .logging import LogFileError, configure_logging, get_logger
from .pipeline import HeaderParser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlparse",
        description="Extract function declarations from a C header as JSON.",
    )
    parser.add_argument(
        "header",
        nargs="?",
        default=None,
        help="Header file to scan (defaults to raylib.h, or the config file's input).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    parser.add_argument(
        "--marker",
        default=None,
        help="Token that starts every public declaration line (default: RLAPI).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .rlparse.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--always-emit-params",
        action="store_true",
        default=None,
        help='Emit "params": [] for functions without parameters.',
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write diagnostics to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ParserConfig:
    if args.config is not None:
        config = load_config(Path(args.config), required=True)
    elif args.header is not None:
        config = load_config(Path(args.header).expanduser().resolve().parent)
    else:
        config = load_config(Path.cwd())

    if args.header is not None:
        config.input = Path(args.header).expanduser()
    if args.output is not None:
        config.output.path = Path(args.output).expanduser()
    if args.marker:
        config.marker = args.marker
    if args.always_emit_params:
        config.output.always_emit_params = True
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for rlparse."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    try:
        configure_logging(verbose=bool(args.verbose), log_file=log_file)
    except LogFileError as exc:
        parser.exit(1, f"rlparse: {exc}\n")
    logger = get_logger("cli")

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        parser.exit(1, f"rlparse: {exc}\n")

    header_parser = HeaderParser(config)
    try:
        result = header_parser.parse()
    except FileUnreadable as exc:
        parser.exit(1, f"rlparse: {exc}\n")

    output_path = config.output.path
    if output_path is None:
        header_parser.emit(result, sys.stdout)
        return

    try:
        with output_path.open("w", encoding="utf-8") as handle:
            header_parser.emit(result, handle)
    except OSError as exc:
        parser.exit(1, f"rlparse: cannot write {output_path}: {exc}\n")
    logger.info("Wrote %d functions to %s", result.functions_count, output_path)


if __name__ == "__main__":
    main(sys.argv[1:])
