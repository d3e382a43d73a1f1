#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/parsers/grammars.py
"""Block grammars for the wiki markup dialect.

Each grammar recognizes one kind of construct starting at a given offset and
either returns the node plus the offset just past the construct, or returns
None without having consumed anything. A grammar never mutates shared state,
so the driver can try the next grammar at the same offset after a None.

Delimited blocks (``{code}`` and the four admonitions) commit once their
opening tag has been recognized. From that point a problem is reported by
raising a ParsingError subclass instead of returning None, and the whole
parse fails.

Grammar summary
---------------
Heading::

    h<1-6>.<spaces or tabs><text>\\n

Code block::

    {code[:key=value|key=value...]}<content>{code}

Admonition (keyword is info, tip, warning or note)::

    {keyword[:key=value|...]}<content>{keyword}

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from markup2md.ast.nodes import Admonition, AdmonitionKind, CodeBlock, Heading, Node, SourceLocation
from markup2md.constants import (
    CODE_BLOCK_KEYWORD,
    DEFAULT_SHOW_ICON,
    OPTION_ASSIGN,
    OPTION_LIST_START,
    TAG_CLOSE,
    TAG_OPEN,
)
from markup2md.exceptions import MalformedOptionValueError, UnknownOptionError, UnterminatedBlockError
from markup2md.parsers.block_options import (
    ADMONITION_OPTIONS,
    CODE_BLOCK_OPTIONS,
    BlockOption,
    LanguageOption,
    OptionFactory,
    ShowIconOption,
    TitleOption,
    find_first_option,
)

logger = logging.getLogger(__name__)

# h1. through h6., inline whitespace, rest of the line, mandatory terminator
HEADING_PATTERN = re.compile(r"h([1-6])\.[ \t]*([^\n]*)\n")

WHITESPACE_PATTERN = re.compile(r"\s*")
# Skipped after an opening or closing tag: trailing blanks and the line break ending the tag line
TAG_TRAILER_PATTERN = re.compile(r"[ \t]*\n?")
OPTION_KEY_END_PATTERN = re.compile(r"[=|}]")
OPTION_VALUE_END_PATTERN = re.compile(r"[|}]")


class MarkupSource:
    """Immutable markup text with an index of line starts.

    Grammars read from ``text`` and use ``location`` to attach line and
    column information to nodes and errors.

    Parameters
    ----------
    text : str
        The complete markup being parsed

    """

    def __init__(self, text: str):
        """Index the line starts of ``text``."""
        self.text = text
        self._line_starts = [0] + [match.end() for match in re.finditer("\n", text)]

    def __len__(self) -> int:
        return len(self.text)

    def location(self, offset: int) -> SourceLocation:
        """Return the 1-based line and column for a character offset."""
        index = bisect_right(self._line_starts, offset) - 1
        return SourceLocation(offset=offset, line=index + 1, column=offset - self._line_starts[index] + 1)


@dataclass(frozen=True)
class GrammarMatch:
    """A successfully recognized construct.

    Parameters
    ----------
    node : Node
        The node built from the construct
    end : int
        Offset just past everything the construct consumed

    """

    node: Node
    end: int


class BlockGrammar(ABC):
    """A parsing rule for one kind of block construct.

    Attributes
    ----------
    name : str
        Short name used in logs
    allows_indent : bool
        Whether the construct may be preceded by spaces or tabs on its line

    """

    name: str = "block"
    allows_indent: bool = False

    @abstractmethod
    def match(self, source: MarkupSource, pos: int) -> Optional[GrammarMatch]:
        """Try to recognize the construct at ``pos``.

        Parameters
        ----------
        source : MarkupSource
            The markup being parsed
        pos : int
            Offset to start matching at

        Returns
        -------
        GrammarMatch or None
            The match, or None if the construct does not start at ``pos``

        Raises
        ------
        ParsingError
            If the construct started at ``pos`` but is malformed

        """
        raise NotImplementedError


class HeadingGrammar(BlockGrammar):
    """Recognize ``hN. text`` lines for N in 1..6."""

    name = "heading"

    def match(self, source: MarkupSource, pos: int) -> Optional[GrammarMatch]:
        heading_match = HEADING_PATTERN.match(source.text, pos)
        if heading_match is None:
            return None

        node = Heading(
            level=int(heading_match.group(1)),
            text=heading_match.group(2),
            source_location=source.location(pos),
        )
        return GrammarMatch(node=node, end=heading_match.end())


class DelimitedBlockGrammar(BlockGrammar):
    """Shared grammar for ``{keyword[:options]}content{keyword}`` blocks.

    Subclasses supply the keyword, the accepted option keys, and
    ``build_node``. The opening tag may be indented.

    Parameters
    ----------
    keyword : str
        Tag keyword, e.g. ``code`` or ``warning``
    option_factories : Mapping[str, OptionFactory]
        Accepted option keys and the factories that parse their values

    """

    allows_indent = True

    def __init__(self, keyword: str, option_factories: Mapping[str, OptionFactory]):
        """Build the literal opening and closing tags for ``keyword``."""
        self.keyword = keyword
        self.name = keyword
        self.option_factories = option_factories
        self.opening_tag = f"{TAG_OPEN}{keyword}"
        self.closing_tag = f"{TAG_OPEN}{keyword}{TAG_CLOSE}"

    @abstractmethod
    def build_node(self, options: Sequence[BlockOption], content: str, location: SourceLocation) -> Node:
        """Create the AST node from the parsed options and raw content."""
        raise NotImplementedError

    def match(self, source: MarkupSource, pos: int) -> Optional[GrammarMatch]:
        text = source.text
        if not text.startswith(self.opening_tag, pos):
            return None

        cursor = WHITESPACE_PATTERN.match(text, pos + len(self.opening_tag)).end()
        if text.startswith(OPTION_LIST_START, cursor):
            options, cursor = self._parse_option_list(source, cursor + len(OPTION_LIST_START), pos)
        elif text.startswith(TAG_CLOSE, cursor):
            options = []
        else:
            # Something like {codex} or {information}: not this block
            return None

        content_start = TAG_TRAILER_PATTERN.match(text, cursor + len(TAG_CLOSE)).end()
        content_end = text.find(self.closing_tag, content_start)
        if content_end == -1:
            raise self._unterminated(source, pos)

        end = TAG_TRAILER_PATTERN.match(text, content_end + len(self.closing_tag)).end()
        node = self.build_node(options, text[content_start:content_end], source.location(pos))
        logger.debug("Matched {%s} block at offset %d with %d option(s)", self.keyword, pos, len(options))
        return GrammarMatch(node=node, end=end)

    def _parse_option_list(
        self, source: MarkupSource, cursor: int, block_start: int
    ) -> tuple[list[BlockOption], int]:
        """Parse ``key=value|key=value`` up to the closing ``}``.

        Parameters
        ----------
        source : MarkupSource
            The markup being parsed
        cursor : int
            Offset just after the ``:``
        block_start : int
            Offset of the opening tag, for unterminated-block errors

        Returns
        -------
        tuple[list[BlockOption], int]
            Options in declaration order, and the offset of the closing ``}``

        """
        text = source.text
        options: list[BlockOption] = []

        # "{code:}" declares an empty option list
        list_end = WHITESPACE_PATTERN.match(text, cursor).end()
        if text.startswith(TAG_CLOSE, list_end):
            return options, list_end

        while True:
            key_end = OPTION_KEY_END_PATTERN.search(text, cursor)
            if key_end is None:
                raise self._unterminated(source, block_start)

            key = text[cursor : key_end.start()]
            factory = self.option_factories.get(key)
            if factory is None:
                location = source.location(cursor)
                raise UnknownOptionError(
                    self.keyword, key, position=cursor, line=location.line, column=location.column
                )
            if key_end.group() != OPTION_ASSIGN:
                location = source.location(key_end.start())
                raise MalformedOptionValueError(
                    self.keyword,
                    key,
                    "",
                    "'=' followed by a value",
                    position=key_end.start(),
                    line=location.line,
                    column=location.column,
                )

            value_start = key_end.end()
            value_end = OPTION_VALUE_END_PATTERN.search(text, value_start)
            if value_end is None:
                raise self._unterminated(source, block_start)

            raw_value = text[value_start : value_end.start()]
            try:
                options.append(factory(raw_value))
            except ValueError as e:
                location = source.location(value_start)
                raise MalformedOptionValueError(
                    self.keyword,
                    key,
                    raw_value,
                    str(e),
                    position=value_start,
                    line=location.line,
                    column=location.column,
                ) from e

            if value_end.group() == TAG_CLOSE:
                return options, value_end.start()
            cursor = value_end.end()

    def _unterminated(self, source: MarkupSource, block_start: int) -> UnterminatedBlockError:
        location = source.location(block_start)
        return UnterminatedBlockError(self.keyword, position=block_start, line=location.line, column=location.column)


class CodeBlockGrammar(DelimitedBlockGrammar):
    """Recognize ``{code[:options]}...{code}`` blocks.

    All five option kinds are validated, but only ``language`` reaches the
    CodeBlock node.
    """

    def __init__(self) -> None:
        """Configure the grammar for the ``code`` keyword."""
        super().__init__(CODE_BLOCK_KEYWORD, CODE_BLOCK_OPTIONS)

    def build_node(self, options: Sequence[BlockOption], content: str, location: SourceLocation) -> Node:
        language = find_first_option(options, LanguageOption)
        return CodeBlock(
            content=content,
            language=language.value if language else None,
            source_location=location,
        )


class AdmonitionGrammar(DelimitedBlockGrammar):
    """Recognize one admonition kind, e.g. ``{tip:title=Hint}...{tip}``.

    Parameters
    ----------
    kind : AdmonitionKind
        The admonition kind this grammar recognizes

    """

    def __init__(self, kind: AdmonitionKind):
        """Configure the grammar for ``kind``'s keyword."""
        super().__init__(kind.keyword, ADMONITION_OPTIONS)
        self.kind = kind

    def build_node(self, options: Sequence[BlockOption], content: str, location: SourceLocation) -> Node:
        title = find_first_option(options, TitleOption)
        show_icon = find_first_option(options, ShowIconOption)
        return Admonition(
            kind=self.kind,
            content=content,
            title=title.value if title else None,
            show_icon=show_icon.value if show_icon else DEFAULT_SHOW_ICON,
            source_location=location,
        )
