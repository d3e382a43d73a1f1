#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from markup2md.ast import Document
from markup2md.exceptions import InvalidOptionsError
from markup2md.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[Any]]) -> None:
        """Render the AST and write it to a file or file-like object.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO
            File path, or a file-like object in text or binary mode

        """
        content = self.render_to_string(doc)
        if isinstance(output, (str, Path)):
            Path(output).write_text(content, encoding="utf-8")
        elif hasattr(output, "mode") and "b" in output.mode:
            output.write(content.encode("utf-8"))
        else:
            try:
                output.write(content)
            except TypeError:
                output.write(content.encode("utf-8"))

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
