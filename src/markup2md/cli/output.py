"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/markup2md/cli/output.py
import argparse
import sys
from typing import IO, Optional


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set, no output file was
    requested, and the target stream is a TTY.

    """
    if not args.rich or getattr(args, "output", None):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            # Closed stream
            return False
    return False


def print_rich_markdown(markdown: str, stream: Optional[IO[str]] = None) -> None:
    """Render markdown to the terminal with Rich.

    Parameters
    ----------
    markdown : str
        Markdown text to display
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    """
    from rich.console import Console
    from rich.markdown import Markdown

    console = Console(file=stream or sys.stdout)
    console.print(Markdown(markdown))
