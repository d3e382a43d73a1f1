#  Copyright (c) 2025 Tom Villani, Ph.D.
# markup2md/options/transpile.py
"""Configuration options for the transpile entry points."""

from __future__ import annotations

from dataclasses import dataclass, field

from markup2md.constants import DEFAULT_ON_ERROR, DEFAULT_PLACEHOLDER, ON_ERROR_MODES, OnErrorMode
from markup2md.options.base import CloneFrozenMixin
from markup2md.options.markdown import MarkdownRendererOptions
from markup2md.options.markup import MarkupParserOptions


@dataclass(frozen=True)
class TranspileOptions(CloneFrozenMixin):
    """Options for a whole markup-to-markdown call.

    Parameters
    ----------
    parser : MarkupParserOptions
        Options passed to the markup parser
    renderer : MarkdownRendererOptions
        Options passed to the markdown renderer
    on_error : {"raise", "raw", "placeholder"}, default "raw"
        What ``transpile_or_fallback`` does when parsing fails:
        - "raise": re-raise the ParsingError
        - "raw": return the original markup unchanged
        - "placeholder": return ``placeholder``
    placeholder : str
        Text returned for failures when ``on_error="placeholder"``

    """

    parser: MarkupParserOptions = field(default_factory=MarkupParserOptions)
    renderer: MarkdownRendererOptions = field(default_factory=MarkdownRendererOptions)
    on_error: OnErrorMode = field(
        default=DEFAULT_ON_ERROR,
        metadata={
            "help": "Behavior when markup cannot be parsed: raise, raw, or placeholder",
            "choices": ON_ERROR_MODES,
            "importance": "core",
        },
    )
    placeholder: str = field(
        default=DEFAULT_PLACEHOLDER,
        metadata={"help": "Replacement text when on_error is 'placeholder'", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the error mode.

        Raises
        ------
        ValueError
            If on_error is not a known mode.

        """
        if self.on_error not in ON_ERROR_MODES:
            raise ValueError(f"on_error must be one of {ON_ERROR_MODES}, got {self.on_error!r}")
