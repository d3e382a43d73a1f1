#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors keep algorithms such as rendering or serialization separate from the
node classes. Each node's ``accept`` method calls the matching ``visit_*``
method on the visitor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from markup2md.ast.nodes import Admonition, CodeBlock, Document, Heading, PlainText


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type.

    Examples
    --------
    Counting headings:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...     def visit_plain_text(self, node): pass
        ...     def visit_code_block(self, node): pass
        ...     def visit_admonition(self, node): pass

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_plain_text(self, node: PlainText) -> Any:
        """Visit a PlainText node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_admonition(self, node: Admonition) -> Any:
        """Visit an Admonition node."""
        pass
