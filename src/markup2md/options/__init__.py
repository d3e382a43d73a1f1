#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for markup2md parsing, rendering and transpiling.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from markup2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from markup2md.options.markdown import MarkdownRendererOptions
from markup2md.options.markup import MarkupParserOptions
from markup2md.options.transpile import TranspileOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
    "MarkupParserOptions",
    "TranspileOptions",
]
