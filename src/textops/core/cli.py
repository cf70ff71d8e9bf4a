"""
Command line entry point for textops.

Each subcommand maps to one text utility; results are written through the
colored console writer and errors are reported with a non-zero exit status.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence

from textops import string_utils
from textops.console import ConsoleWriter
from textops.constants import FilenamePlatform
from textops.core.common.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    TextOpsError,
)
from textops.core.common.logging_utils import get_logger
from textops.core.config.app_config import AppConfig, LogLevel, load_config
from textops.core.services.arg_tokenizer import ArgTokenizer

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="textops", description="Small text utilities"
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="FILE",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        help="Logging level (overrides config and TEXTOPS_LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        help="Also write log records to this file",
    )
    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        default=None,
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Split an argument line into a verb and flag segments",
        description=(
            "Split an argument line into a verb and flag segments. Use '--' "
            "before a line that starts with '-'. Reads lines from stdin when "
            "LINE is omitted."
        ),
    )
    tokenize_parser.add_argument("line", nargs="?", metavar="LINE")
    tokenize_parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tokens as a JSON array",
    )

    ascii_parser = subparsers.add_parser(
        "is-ascii", help="Check whether TEXT contains only ASCII characters"
    )
    ascii_parser.add_argument("text", metavar="TEXT")

    alnum_parser = subparsers.add_parser(
        "alnum", help="Remove characters other than letters, digits and spaces"
    )
    alnum_parser.add_argument("text", metavar="TEXT")

    strip_parser = subparsers.add_parser(
        "strip-diacritics", help="Replace accented letters with their base letters"
    )
    strip_parser.add_argument("text", metavar="TEXT")

    display_parser = subparsers.add_parser(
        "display", help="Split a camel-case word into separate words"
    )
    display_parser.add_argument("text", metavar="TEXT")

    filename_parser = subparsers.add_parser(
        "filename", help="Turn TEXT into a valid file name"
    )
    filename_parser.add_argument("text", metavar="TEXT")
    filename_parser.add_argument(
        "--replacement",
        dest="replacement",
        help="Replacement for invalid characters (default from config, '_')",
    )
    filename_parser.add_argument(
        "--platform",
        dest="platform",
        choices=[p.value for p in FilenamePlatform],
        help="Target platform for invalid characters (default: running OS)",
    )

    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_cli_parser()
    return parser.parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply CLI overrides on top of it."""
    cfg = load_config(getattr(args, "config_file", None))

    if args.log_level is not None:
        cfg.logging.level = LogLevel(args.log_level)
    if args.log_file is not None:
        cfg.logging.log_file = args.log_file
    if args.no_color:
        cfg.console.color = False
    if getattr(args, "replacement", None) is not None:
        cfg.filename.replacement = args.replacement
    if getattr(args, "platform", None) is not None:
        cfg.filename.platform = FilenamePlatform(args.platform)

    return cfg


def _configure_logging(cfg: AppConfig) -> None:
    """Configure logging based on configuration."""
    from textops.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(
        level=getattr(logging, cfg.logging.level.value),
        log_file=cfg.logging.log_file,
    )


def _read_stdin_lines() -> list[str]:
    return [line.rstrip("\r\n") for line in sys.stdin]


def _run_tokenize(
    args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter
) -> int:
    tokenizer = ArgTokenizer()
    lines = [args.line] if args.line is not None else _read_stdin_lines()
    for line in lines:
        tokens = tokenizer.tokenize(line)
        if args.json_output:
            out.write_line(json.dumps(tokens))
            continue
        for token in tokens:
            out.write_info(token)
    return EXIT_OK


def _run_is_ascii(args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter) -> int:
    if string_utils.is_ascii(args.text):
        out.write_success("true")
        return EXIT_OK
    out.write_warn("false")
    return EXIT_FAILURE


def _run_alnum(args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter) -> int:
    out.write_info(string_utils.remove_non_alphanumeric(args.text) or "")
    return EXIT_OK


def _run_strip_diacritics(
    args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter
) -> int:
    out.write_info(string_utils.strip_diacritics(args.text) or "")
    return EXIT_OK


def _run_display(args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter) -> int:
    out.write_info(string_utils.to_display_text(args.text) or "")
    return EXIT_OK


def _run_filename(args: argparse.Namespace, cfg: AppConfig, out: ConsoleWriter) -> int:
    result = string_utils.to_valid_filename(
        args.text,
        cfg.filename.replacement,
        platform=cfg.filename.platform,
    )
    out.write_success(result or "")
    return EXIT_OK


COMMAND_HANDLERS: dict[
    str, Callable[[argparse.Namespace, AppConfig, ConsoleWriter], int]
] = {
    "tokenize": _run_tokenize,
    "is-ascii": _run_is_ascii,
    "alnum": _run_alnum,
    "strip-diacritics": _run_strip_diacritics,
    "display": _run_display,
    "filename": _run_filename,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point; returns the process exit status."""
    args = parse_cli_args(list(argv) if argv is not None else None)

    try:
        cfg = apply_cli_args(args)
    except ConfigurationError as e:
        sys.stderr.write(f"ERROR: {e.message}\n")
        return EXIT_INVALID_ARGUMENT

    try:
        _configure_logging(cfg)
    except OSError as e:
        sys.stderr.write(
            f"ERROR: Cannot open log file {cfg.logging.log_file}: {e.strerror or e}\n"
        )
        return EXIT_INVALID_ARGUMENT
    logger = get_logger(__name__)

    out = ConsoleWriter(sys.stdout, use_color=cfg.console.color)
    err = ConsoleWriter(sys.stderr, use_color=cfg.console.color)

    handler = COMMAND_HANDLERS[args.command]
    logger.debug("running command", command=args.command)
    try:
        return handler(args, cfg, out)
    except InvalidArgumentError as e:
        logger.debug("invalid argument", argument=e.argument, details=e.details)
        err.write_error(f"error: {e.message}")
        return EXIT_INVALID_ARGUMENT
    except TextOpsError as e:
        logging.error(f"Command {args.command} failed: {e}")
        err.write_error(f"error: {e.message}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
