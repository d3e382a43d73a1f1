#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/parsers/markup.py
"""Wiki markup to AST converter.

The parser scans the document left to right. At each position it tries the
block grammars in priority order (heading, code block, then the info, tip,
warning and note admonitions). Headings must start the line; the opening
tag of a code block or admonition may follow spaces or tabs. When none
matches, one line is consumed as PlainText. The result is a Document whose children are in document order.

"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from markup2md.ast import AdmonitionKind, Document, Node, PlainText
from markup2md.options.markup import MarkupParserOptions
from markup2md.parsers.base import BaseParser, ParserInput
from markup2md.parsers.grammars import (
    AdmonitionGrammar,
    BlockGrammar,
    CodeBlockGrammar,
    GrammarMatch,
    HeadingGrammar,
    MarkupSource,
)

logger = logging.getLogger(__name__)

INDENT_PATTERN = re.compile(r"[ \t]*")

# Priority order; the first grammar that matches at a position wins
DEFAULT_GRAMMARS: tuple[BlockGrammar, ...] = (
    HeadingGrammar(),
    CodeBlockGrammar(),
    AdmonitionGrammar(AdmonitionKind.INFO),
    AdmonitionGrammar(AdmonitionKind.TIP),
    AdmonitionGrammar(AdmonitionKind.WARNING),
    AdmonitionGrammar(AdmonitionKind.NOTE),
)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class MarkupParser(BaseParser):
    r"""Convert wiki markup to AST representation.

    Parameters
    ----------
    options : MarkupParserOptions or None, default = None
        Parser configuration options
    grammars : sequence of BlockGrammar or None, default = None
        Block grammars in priority order. Defaults to ``DEFAULT_GRAMMARS``.

    Examples
    --------
    Basic parsing:

        >>> parser = MarkupParser()
        >>> doc = parser.parse("h1. Title\n{code:language=python}\nprint(1)\n{code}")
        >>> [type(node).__name__ for node in doc.children]
        ['Heading', 'CodeBlock']

    """

    def __init__(
        self,
        options: MarkupParserOptions | None = None,
        grammars: Optional[Sequence[BlockGrammar]] = None,
    ):
        """Initialize the markup parser with options and grammars."""
        BaseParser._validate_options_type(options, MarkupParserOptions, "markup")
        options = options or MarkupParserOptions()
        super().__init__(options)
        self.options: MarkupParserOptions = options
        self.grammars: tuple[BlockGrammar, ...] = tuple(grammars) if grammars is not None else DEFAULT_GRAMMARS

    def parse(self, input_data: ParserInput) -> Document:
        """Parse markup input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markup to parse. A ``str`` is always the markup itself.

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If a block is unterminated or has an invalid option list

        """
        markup = self._load_text_content(input_data)
        if self.options.normalize_line_endings:
            markup = normalize_line_endings(markup)

        children = self.parse_nodes(markup)
        logger.debug("Parsed %d node(s) from %d characters of markup", len(children), len(markup))
        return Document(children=children)

    def parse_nodes(self, markup: str) -> list[Node]:
        """Split markup into nodes, in document order.

        Parameters
        ----------
        markup : str
            Markup text; line endings are used as-is

        Returns
        -------
        list[Node]
            Recognized blocks and plain text lines

        """
        source = MarkupSource(markup)
        nodes: list[Node] = []
        pos = 0
        while pos < len(source):
            match = self._match_block(source, pos) or self._match_plain_text(source, pos)
            nodes.append(match.node)
            pos = match.end
        return nodes

    def _match_block(self, source: MarkupSource, pos: int) -> Optional[GrammarMatch]:
        """Return the first grammar match at ``pos``, or None.

        Grammars that allow indentation are tried after any spaces and tabs
        at ``pos``; the indentation is dropped along with the block.
        """
        indent_end = INDENT_PATTERN.match(source.text, pos).end()
        for grammar in self.grammars:
            match = grammar.match(source, indent_end if grammar.allows_indent else pos)
            if match is not None:
                return match
        return None

    @staticmethod
    def _match_plain_text(source: MarkupSource, pos: int) -> GrammarMatch:
        """Consume one line, including its terminator, as PlainText."""
        text = source.text
        line_end = text.find("\n", pos)
        if line_end == -1:
            return GrammarMatch(node=PlainText(text=text[pos:], source_location=source.location(pos)), end=len(text))
        return GrammarMatch(
            node=PlainText(text=text[pos:line_end], source_location=source.location(pos)), end=line_end + 1
        )
