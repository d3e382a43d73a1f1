#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/parsers/__init__.py
"""Parsers that turn wiki markup into the markup2md AST."""

from markup2md.parsers.base import BaseParser
from markup2md.parsers.grammars import (
    AdmonitionGrammar,
    BlockGrammar,
    CodeBlockGrammar,
    DelimitedBlockGrammar,
    GrammarMatch,
    HeadingGrammar,
    MarkupSource,
)
from markup2md.parsers.markup import DEFAULT_GRAMMARS, MarkupParser

__all__ = [
    "AdmonitionGrammar",
    "BaseParser",
    "BlockGrammar",
    "CodeBlockGrammar",
    "DEFAULT_GRAMMARS",
    "DelimitedBlockGrammar",
    "GrammarMatch",
    "HeadingGrammar",
    "MarkupParser",
    "MarkupSource",
]
