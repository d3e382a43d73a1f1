#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class parsers inherit from. The
BaseParser validates option types and loads text from the supported input
types.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from markup2md.ast import Document
from markup2md.exceptions import InvalidOptionsError, ValidationError
from markup2md.options.base import BaseParserOptions
from markup2md.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[Any], bytes]


class BaseParser(ABC):
    """Abstract base class for markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: markup text itself (never interpreted as a file path)
    - Path: file to read
    - IO: file-like object in binary or text mode
    - bytes: raw markup bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input into an AST.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            The input to parse

        Returns
        -------
        Document
            AST Document node with the recognized constructs in order

        Raises
        ------
        ParsingError
            If the input contains a malformed construct
        ValidationError
            If input data is of an unsupported type

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markup text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Input data to load

        Returns
        -------
        str
            Markup content as string

        Raises
        ------
        ValidationError
            If input_data is of an unsupported type

        """
        if isinstance(input_data, str):
            return input_data
        elif isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            logger.debug("Reading markup from %s", input_data)
            return read_text_with_encoding_detection(input_data.read_bytes())
        elif hasattr(input_data, "read"):
            return normalize_stream_to_text(input_data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
