"""markup2md - convert issue-tracker wiki markup to markdown.

markup2md converts a small wiki markup dialect, as found in ticket
descriptions, to GitHub-flavored markdown. It recognizes headings
(``h1.`` to ``h6.``), ``{code}`` blocks and the ``{info}``, ``{tip}``,
``{warning}`` and ``{note}`` admonitions. Every other line is passed through
unchanged.

Conversion happens in two steps: ``MarkupParser`` builds a ``Document`` AST
and ``MarkdownRenderer`` renders it. ``transpile`` runs both. Malformed
blocks raise a ``ParsingError`` subclass that records where parsing failed;
``transpile_or_fallback`` returns the raw markup or a placeholder instead.

Examples
--------
Basic conversion:

    >>> from markup2md import transpile
    >>> transpile("h1. Release notes\\n{info:title=Heads up}\\nRead me\\n{info}")
    '# Release notes\\n> [!INFO]**Heads up**Read me\\n\\n'

Tolerating malformed markup:

    >>> from markup2md import transpile_or_fallback
    >>> transpile_or_fallback("{code}\\nnever closed")
    '{code}\\nnever closed'

Hover text for a ticket:

    >>> from markup2md import TicketSummary, render_ticket_hover
    >>> print(render_ticket_hover(TicketSummary(key="AUTO-1", status="Open", title="Crash")))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from markup2md.api import parse, render, transpile, transpile_or_fallback
from markup2md.ast import Admonition, AdmonitionKind, CodeBlock, Document, Heading, Node, PlainText
from markup2md.exceptions import (
    IllegalHeadingLevelError,
    InvalidOptionsError,
    MalformedOptionValueError,
    Markup2MdError,
    ParsingError,
    RenderingError,
    UnknownOptionError,
    UnterminatedBlockError,
    ValidationError,
)
from markup2md.hover import TicketSummary, render_ticket_hover
from markup2md.options import MarkdownRendererOptions, MarkupParserOptions, TranspileOptions
from markup2md.parsers import MarkupParser
from markup2md.renderers import MarkdownRenderer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "parse",
    "render",
    "transpile",
    "transpile_or_fallback",
    "render_ticket_hover",
    "TicketSummary",
    # Pipeline classes
    "MarkupParser",
    "MarkdownRenderer",
    # Options
    "MarkupParserOptions",
    "MarkdownRendererOptions",
    "TranspileOptions",
    # AST
    "Admonition",
    "AdmonitionKind",
    "CodeBlock",
    "Document",
    "Heading",
    "Node",
    "PlainText",
    # Exceptions
    "Markup2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "UnterminatedBlockError",
    "UnknownOptionError",
    "MalformedOptionValueError",
    "IllegalHeadingLevelError",
    "RenderingError",
]
