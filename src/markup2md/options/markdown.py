#  Copyright (c) 2025 Tom Villani, Ph.D.
# markup2md/options/markdown.py
"""Configuration options for markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from markup2md.constants import CODE_FENCE_CHARS, DEFAULT_CODE_FENCE_CHAR, DEFAULT_CODE_FENCE_MIN, CodeFenceChar
from markup2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-markdown rendering.

    Parameters
    ----------
    code_fence_char : {"`", "~"}, default "`"
        Character to use for code fences (backtick or tilde).
    code_fence_min : int, default 3
        Length of code fences. Must be at least 3.

    """

    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={
            "help": "Character to use for code fences (backtick or tilde)",
            "choices": CODE_FENCE_CHARS,
            "importance": "advanced",
        },
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Length of code fences (at least 3)", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate fence settings.

        Raises
        ------
        ValueError
            If the fence character or length is invalid.

        """
        super().__post_init__()
        if self.code_fence_char not in CODE_FENCE_CHARS:
            raise ValueError(f"code_fence_char must be one of {CODE_FENCE_CHARS}, got {self.code_fence_char!r}")
        if self.code_fence_min < DEFAULT_CODE_FENCE_MIN:
            raise ValueError(f"code_fence_min must be at least {DEFAULT_CODE_FENCE_MIN}, got {self.code_fence_min}")

    @property
    def code_fence(self) -> str:
        """The full fence string, e.g. three backticks."""
        return self.code_fence_char * self.code_fence_min
