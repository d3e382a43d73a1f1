#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/renderers/markdown.py
"""Markdown rendering from AST.

Every node renders to a fixed piece of markdown. The document render is the
concatenation of the node renders in order, each followed by exactly one
newline; nothing else is inserted between nodes.

=============  =============================================
Node           Markdown
=============  =============================================
PlainText      the line text
Heading        ``#`` x level, a space, the heading text
CodeBlock      fence + language, newline, content, fence
Admonition     ``> [!KIND]`` + ``**title**`` + content
=============  =============================================

The admonition render has no separator between marker, title and content.
``show_icon`` does not change the output.

"""

from __future__ import annotations

from markup2md.ast.nodes import Admonition, CodeBlock, Document, Heading, Node, PlainText
from markup2md.ast.visitors import NodeVisitor
from markup2md.exceptions import RenderingError
from markup2md.options.markdown import MarkdownRendererOptions
from markup2md.renderers.base import BaseRenderer

NODE_TERMINATOR = "\n"
BLOCK_NODE_TYPES = (PlainText, Heading, CodeBlock, Admonition)


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from markup2md.ast import CodeBlock, Document
        >>> doc = Document(children=[CodeBlock(content="print(1)\\n", language="python")])
        >>> MarkdownRenderer().render_to_string(doc)
        '```python\\nprint(1)\\n```\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a Document to markdown.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        RenderingError
            If ``doc`` is not a Document or contains an unsupported node

        """
        if not isinstance(doc, Document):
            raise RenderingError(f"Expected a Document, got {type(doc).__name__}", rendering_stage="document")
        self._output = []
        doc.accept(self)
        return "".join(self._output)

    def render_node(self, node: Node) -> str:
        """Render a single node without the trailing newline the document adds.

        Parameters
        ----------
        node : Node
            Node to render

        Returns
        -------
        str
            Markdown for this node alone

        """
        saved_output = self._output
        self._output = []
        try:
            self._accept(node)
            return "".join(self._output)
        finally:
            self._output = saved_output

    def _accept(self, node: Node) -> None:
        if not isinstance(node, BLOCK_NODE_TYPES):
            raise RenderingError(
                f"Unsupported node type for markdown rendering: {type(node).__name__}", rendering_stage="node"
            )
        node.accept(self)

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render

        """
        for child in node.children:
            self._accept(child)
            self._output.append(NODE_TERMINATOR)

    def visit_plain_text(self, node: PlainText) -> None:
        """Render a PlainText line unchanged."""
        self._output.append(node.text)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as an ATX heading."""
        self._output.append(f"{'#' * node.level} {node.text}")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced block.

        The language tag follows the opening fence with no space. The
        content is emitted verbatim and the closing fence follows it directly.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        fence = self.options.code_fence
        self._output.append(f"{fence}{node.language or ''}\n")
        self._output.append(node.content)
        self._output.append(fence)

    def visit_admonition(self, node: Admonition) -> None:
        """Render an Admonition node as a callout.

        Parameters
        ----------
        node : Admonition
            Admonition to render

        """
        self._output.append(f"> [!{node.kind.marker}]")
        if node.title is not None:
            self._output.append(f"**{node.title}**")
        self._output.append(node.content)
