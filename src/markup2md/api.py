"""The major exported API functions for markup conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/markup2md/api.py
import logging
from typing import Optional

from markup2md.ast.nodes import Document
from markup2md.constants import ON_ERROR_MODES, OnErrorMode
from markup2md.exceptions import ParsingError, ValidationError
from markup2md.options.markdown import MarkdownRendererOptions
from markup2md.options.markup import MarkupParserOptions
from markup2md.options.transpile import TranspileOptions
from markup2md.parsers.base import ParserInput
from markup2md.parsers.markup import MarkupParser
from markup2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def parse(source: ParserInput, options: Optional[MarkupParserOptions] = None) -> Document:
    """Parse wiki markup into an AST Document.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markup to parse. A ``str`` is always the markup text itself.
    options : MarkupParserOptions, optional
        Parser options

    Returns
    -------
    Document
        AST document with one child per recognized block or plain line

    Raises
    ------
    ParsingError
        If a block is unterminated or has an invalid option list

    """
    return MarkupParser(options).parse(source)


def render(doc: Document, options: Optional[MarkdownRendererOptions] = None) -> str:
    """Render an AST Document to markdown.

    Parameters
    ----------
    doc : Document
        Document to render
    options : MarkdownRendererOptions, optional
        Renderer options

    Returns
    -------
    str
        Markdown text

    """
    return MarkdownRenderer(options).render_to_string(doc)


def transpile(source: ParserInput, options: Optional[TranspileOptions] = None) -> str:
    """Convert wiki markup to markdown.

    Parsing either succeeds for the whole input or raises; there is no
    partial output. ``options.on_error`` is ignored here, see
    ``transpile_or_fallback``.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markup to convert
    options : TranspileOptions, optional
        Parser and renderer options

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    ParsingError
        If the markup cannot be parsed

    Examples
    --------
        >>> transpile("h2. Setup\\n{code:language=sh}\\nmake\\n{code}")
        '## Setup\\n```sh\\nmake\\n```\\n'

    """
    options = options or TranspileOptions()
    doc = parse(source, options.parser)
    return render(doc, options.renderer)


def transpile_or_fallback(
    markup: str,
    options: Optional[TranspileOptions] = None,
    on_error: Optional[OnErrorMode] = None,
) -> str:
    """Convert wiki markup to markdown without raising on malformed markup.

    Intended for callers that must always produce some text, such as an
    editor answering a hover request.

    Parameters
    ----------
    markup : str
        Markup to convert
    options : TranspileOptions, optional
        Parser and renderer options, including the default ``on_error`` mode
    on_error : {"raise", "raw", "placeholder"}, optional
        Overrides ``options.on_error`` for this call

    Returns
    -------
    str
        Markdown, the original markup ("raw"), or ``options.placeholder``
        ("placeholder")

    Raises
    ------
    ParsingError
        Only when the effective mode is "raise"
    ValidationError
        If on_error is not a known mode

    """
    options = options or TranspileOptions()
    mode = on_error or options.on_error
    if mode not in ON_ERROR_MODES:
        raise ValidationError(
            f"on_error must be one of {ON_ERROR_MODES}, got {mode!r}", parameter_name="on_error", parameter_value=mode
        )
    try:
        return transpile(markup, options)
    except ParsingError as e:
        if mode == "raise":
            raise
        logger.warning("Could not transpile markup (%s); returning %s text instead", e, mode)
        if mode == "placeholder":
            return options.placeholder
        return markup
