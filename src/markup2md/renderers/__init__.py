#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/renderers/__init__.py
"""Renderers that turn the markup2md AST into output text."""

from markup2md.renderers.base import BaseRenderer
from markup2md.renderers.markdown import MarkdownRenderer

__all__ = ["BaseRenderer", "MarkdownRenderer"]
