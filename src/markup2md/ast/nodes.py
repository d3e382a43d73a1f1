#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/ast/nodes.py
"""AST node classes for wiki markup documents.

This module defines the closed set of nodes the markup parser produces. Each
node represents one recognized block construct, or one line of opaque plain
text that matched no construct.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    - Document (root, ordered children)
    - PlainText, Heading, CodeBlock, Admonition

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from markup2md.exceptions import IllegalHeadingLevelError


class AdmonitionKind(Enum):
    """Callout block kinds; the value is the markup keyword."""

    INFO = "info"
    TIP = "tip"
    WARNING = "warning"
    NOTE = "note"

    @property
    def keyword(self) -> str:
        """Keyword used in the opening and closing tags (``{info}``)."""
        return self.value

    @property
    def marker(self) -> str:
        """Uppercase name used in the markdown callout marker (``[!INFO]``)."""
        return self.value.upper()


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    offset : int
        0-based character offset of the construct in the parsed text
    line : int
        1-based line number
    column : int
        1-based column number
    metadata : dict, default = empty dict
        Additional location information

    """

    offset: int
    line: int
    column: int
    metadata: dict[str, Any] = field(default_factory=dict)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Document(Node):
    """Root document node holding the parsed nodes in document order.

    Parameters
    ----------
    children : list of Node, default = empty list
        Nodes in the order they appear in the source
    metadata : dict, default = empty dict
        Document-level metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class PlainText(Node):
    """One line of text that matched no block construct.

    Parameters
    ----------
    text : str
        Line content without its line terminator
    metadata : dict, default = empty dict
        Node metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    text: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line."""
        return visitor.visit_plain_text(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    text : str, default = ""
        Heading text, possibly empty
    metadata : dict, default = empty dict
        Heading metadata
    source_location : SourceLocation or None, default = None
        Source location information

    Raises
    ------
    IllegalHeadingLevelError
        If level is outside 1-6

    """

    level: int
    text: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            location = self.source_location
            raise IllegalHeadingLevelError(
                self.level,
                position=location.offset if location else None,
                line=location.line if location else None,
                column=location.column if location else None,
            )

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Only the ``language`` option of the source block survives into the node;
    ``title``, ``linenumbers``, ``firstline`` and ``collapse`` are validated by
    the grammar and then dropped.

    Parameters
    ----------
    content : str
        Verbatim code content, including embedded newlines
    language : str or None, default = None
        Language tag for the markdown fence
    metadata : dict, default = empty dict
        Code block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class Admonition(Node):
    """Callout block of kind info, tip, warning or note.

    Parameters
    ----------
    kind : AdmonitionKind
        Callout kind, fixed by the block's keyword
    content : str
        Verbatim block content
    title : str or None, default = None
        Optional title from the ``title=`` option
    show_icon : bool, default = True
        Value of the ``show_icon=`` option. Carried for completeness; the
        markdown renderer does not use it.
    metadata : dict, default = empty dict
        Admonition metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    kind: AdmonitionKind
    content: str
    title: Optional[str] = None
    show_icon: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this admonition."""
        return visitor.visit_admonition(self)
