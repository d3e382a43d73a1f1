#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/ast/__init__.py
"""Abstract Syntax Tree (AST) module for wiki markup documents.

The module consists of:

- nodes: AST node classes (Document, PlainText, Heading, CodeBlock, Admonition)
- visitors: Visitor pattern base class used by the renderer
- serialization: JSON serialization of AST structures

Examples
--------
    >>> from markup2md.ast import Document, Heading
    >>> from markup2md.renderers.markdown import MarkdownRenderer
    >>> doc = Document(children=[Heading(level=2, text="Title")])
    >>> MarkdownRenderer().render_to_string(doc)
    '## Title\\n'

"""

from __future__ import annotations

from markup2md.ast.nodes import (
    Admonition,
    AdmonitionKind,
    CodeBlock,
    Document,
    Heading,
    Node,
    PlainText,
    SourceLocation,
)
from markup2md.ast.serialization import ast_to_dict, ast_to_json
from markup2md.ast.visitors import NodeVisitor

__all__ = [
    "Admonition",
    "AdmonitionKind",
    "CodeBlock",
    "Document",
    "Heading",
    "Node",
    "NodeVisitor",
    "PlainText",
    "SourceLocation",
    "ast_to_dict",
    "ast_to_json",
]
