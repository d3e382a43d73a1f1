#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/ast/serialization.py
"""JSON serialization for AST nodes.

Used by the command line ``--ast`` flag to inspect what the parser recognized.

Examples
--------
    >>> from markup2md.ast import Document, Heading
    >>> from markup2md.ast.serialization import ast_to_json
    >>> print(ast_to_json(Document(children=[Heading(level=1, text="Title")])))

"""

from __future__ import annotations

import json
from typing import Any

from markup2md.ast.nodes import Admonition, CodeBlock, Document, Heading, Node, PlainText, SourceLocation

SCHEMA_VERSION = 1


def _add_metadata_and_source(result: dict[str, Any], node: Node) -> None:
    """Add metadata and source_location to result dict."""
    result["metadata"] = node.metadata
    if node.source_location:
        result["source_location"] = ast_to_dict(node.source_location)


def _serialize_source_location(node: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "SourceLocation",
        "offset": node.offset,
        "line": node.line,
        "column": node.column,
    }
    if node.metadata:
        result["metadata"] = node.metadata
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Document", "children": [ast_to_dict(child) for child in node.children]}
    _add_metadata_and_source(result, node)
    return result


def _serialize_plain_text(node: PlainText) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "PlainText", "text": node.text}
    _add_metadata_and_source(result, node)
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Heading", "level": node.level, "text": node.text}
    _add_metadata_and_source(result, node)
    return result


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "CodeBlock", "language": node.language, "content": node.content}
    _add_metadata_and_source(result, node)
    return result


def _serialize_admonition(node: Admonition) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "Admonition",
        "kind": node.kind.value,
        "title": node.title,
        "show_icon": node.show_icon,
        "content": node.content,
    }
    _add_metadata_and_source(result, node)
    return result


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Any] = {
    SourceLocation: _serialize_source_location,
    Document: _serialize_document,
    PlainText: _serialize_plain_text,
    Heading: _serialize_heading,
    CodeBlock: _serialize_code_block,
    Admonition: _serialize_admonition,
}


def ast_to_dict(node: Node | SourceLocation) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node or SourceLocation
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type has no serializer

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    node_dict = ast_to_dict(node)
    versioned_dict = {"schema_version": SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)
