#  Copyright (c) 2025 Tom Villani, Ph.D.
# markup2md/options/markup.py
"""Configuration options for wiki markup parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from markup2md.constants import DEFAULT_NORMALIZE_LINE_ENDINGS
from markup2md.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkupParserOptions(BaseParserOptions):
    """Configuration options for markup-to-AST parsing.

    Parameters
    ----------
    normalize_line_endings : bool, default True
        Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n`` before
        parsing. Ticket descriptions fetched over HTTP commonly use ``\\r\\n``.
        When False, a ``\\r`` is ordinary line content.

    Examples
    --------
        >>> from markup2md.parsers.markup import MarkupParser
        >>> parser = MarkupParser(MarkupParserOptions(normalize_line_endings=False))

    """

    normalize_line_endings: bool = field(
        default=DEFAULT_NORMALIZE_LINE_ENDINGS,
        metadata={
            "help": "Normalize CRLF and CR line endings to LF before parsing",
            "cli_name": "no-normalize-line-endings",
            "importance": "core",
        },
    )
