"""Command-line interface for the markup2md transpiler.

Converts wiki markup read from a file or stdin to markdown on stdout or an
output file.

Environment Variable Support
----------------------------
Options support environment variable defaults using the pattern
MARKUP2MD_<OPTION_NAME>, with the option name upper-cased and hyphens
replaced by underscores. CLI arguments always override environment
variables, and environment variables override configuration files.

Examples
--------
Convert a file::

    $ markup2md description.txt

Read from stdin and write to a file::

    $ cat description.txt | markup2md - -o description.md

Never fail, show the raw markup when it cannot be parsed::

    $ markup2md description.txt --on-error raw

Inspect the parsed blocks::

    $ markup2md description.txt --ast

Preview in the terminal::

    $ markup2md description.txt --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from markup2md import __version__
from markup2md.api import parse, transpile_or_fallback
from markup2md.ast.serialization import ast_to_json
from markup2md.cli.config import load_config_with_priority, options_from_config
from markup2md.cli.custom_actions import TrackingStoreAction, TrackingStoreTrueAction
from markup2md.cli.output import print_rich_markdown, should_use_rich_output
from markup2md.constants import (
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    ON_ERROR_MODES,
)
from markup2md.exceptions import Markup2MdError, ParsingError
from markup2md.logging_utils import configure_logging
from markup2md.options.transpile import TranspileOptions
from markup2md.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"

__all__ = ["main", "create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the markup2md command."""
    parser = argparse.ArgumentParser(
        prog="markup2md",
        description="Convert wiki markup (headings, code blocks, admonitions) to markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Markup file to convert; reads stdin when omitted or '-'",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-o", "--output", action=TrackingStoreAction, metavar="PATH", help="Write markdown to PATH instead of stdout"
    )
    parser.add_argument(
        "--config",
        action=TrackingStoreAction,
        metavar="PATH",
        help="Configuration file (.toml, .yaml, .json or pyproject.toml); auto-discovered when omitted",
    )
    parser.add_argument(
        "--on-error",
        dest="on_error",
        action=TrackingStoreAction,
        choices=ON_ERROR_MODES,
        help="What to do when the markup cannot be parsed (default: raise)",
    )
    parser.add_argument(
        "--ast", action=TrackingStoreTrueAction, help="Print the parsed document as JSON instead of markdown"
    )
    parser.add_argument("--rich", action=TrackingStoreTrueAction, help="Preview the markdown in the terminal with Rich")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        action=TrackingStoreAction,
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", dest="log_file", action=TrackingStoreAction, metavar="PATH", help="Also write log output to PATH"
    )
    parser.add_argument(
        "--trace", action=TrackingStoreTrueAction, help="Debug logging with timestamps, logger names and line numbers"
    )
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # An invalid MARKUP2MD_LOG_LEVEL leaves log_level unset
    configure_logging(
        parsed_args.log_level or DEFAULT_LOG_LEVEL, log_file=parsed_args.log_file, trace_mode=parsed_args.trace
    )


def _resolve_options(parsed_args: argparse.Namespace) -> TranspileOptions:
    """Combine the configuration file and flags into TranspileOptions.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration cannot be loaded or is invalid

    """
    config = load_config_with_priority(parsed_args.config)
    options = options_from_config(config)

    if parsed_args.on_error is not None:
        return options.create_updated(on_error=parsed_args.on_error)
    if "on_error" not in config.get("transpile", {}):
        # Unlike the library, the command fails on malformed markup unless told otherwise
        return options.create_updated(on_error="raise")
    return options


def _read_input(input_arg: Optional[str]) -> str:
    """Read markup from a file path, or from stdin for ``-`` or no argument."""
    if input_arg is None or input_arg == STDIN_MARKER:
        logger.debug("Reading markup from stdin")
        return normalize_stream_to_text(sys.stdin)

    path = Path(input_arg)
    logger.debug("Reading markup from %s", path)
    return read_text_with_encoding_detection(path.read_bytes())


def _write_output(content: str, parsed_args: argparse.Namespace) -> None:
    """Write the result to the output file, a Rich preview, or stdout."""
    if parsed_args.output:
        Path(parsed_args.output).write_text(content, encoding="utf-8")
        logger.info("Wrote %s", parsed_args.output)
    elif not parsed_args.ast and should_use_rich_output(parsed_args):
        print_rich_markdown(content)
    else:
        sys.stdout.write(content)


def main(args: list[str] | None = None) -> int:
    """Run the markup2md command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code: 0 on success, 1 for markup that cannot be parsed,
        2 for invalid options or configuration, 3 for file errors

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = _resolve_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markup = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: could not read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        if parsed_args.ast:
            content = ast_to_json(parse(markup, options.parser), indent=2) + "\n"
        else:
            content = transpile_or_fallback(markup, options)
    except ParsingError as e:
        logger.debug("Parsing failed", exc_info=True)
        print(f"Error: {e.error_kind}: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except Markup2MdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        _write_output(content, parsed_args)
    except OSError as e:
        print(f"Error: could not write {parsed_args.output}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
