#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the markup2md library.

This module defines specialized exception classes for the error conditions
that can occur while parsing wiki markup and rendering markdown.

Exception Hierarchy
-------------------
- Markup2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (markup parsing failures, with the point of failure)
    - UnterminatedBlockError (opening tag without a closing tag)
    - UnknownOptionError (option key not valid for the block)
    - MalformedOptionValueError (option value of the wrong form)
    - IllegalHeadingLevelError (heading level outside 1-6)

  - RenderingError (output generation failures)

"""

from typing import Any, Optional


class Markup2MdError(Exception):
    """Base exception class for all markup2md-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Markup2MdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Markup2MdError):
    """Exception raised when markup parsing fails.

    The whole transpile call fails with this error; no partial markdown is
    produced for the failing block or the rest of the document.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure
    position : int, optional
        0-based character offset of the point of failure
    line : int, optional
        1-based line of the point of failure
    column : int, optional
        1-based column of the point of failure
    block : str, optional
        Keyword of the block being parsed (``code``, ``info``, ...)

    Attributes
    ----------
    error_kind : str
        Stable name of the error kind, for callers that report it

    """

    error_kind = "ParsingError"

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        original_error: Exception | None = None,
        *,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        block: Optional[str] = None,
    ):
        """Initialize the parsing error."""
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.position = position
        self.line = line
        self.column = column
        self.block = block


class UnterminatedBlockError(ParsingError):
    """Exception raised when a block's closing tag is never found.

    Parameters
    ----------
    block : str
        Keyword of the unterminated block
    position : int, optional
        Offset of the opening tag
    line, column : int, optional
        Line and column of the opening tag

    """

    error_kind = "UnterminatedBlock"

    def __init__(
        self,
        block: str,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Initialize the unterminated block error."""
        super().__init__(
            f"Unterminated {{{block}}} block: no closing {{{block}}} before end of input",
            parsing_stage="block",
            position=position,
            line=line,
            column=column,
            block=block,
        )


class UnknownOptionError(ParsingError):
    """Exception raised for an option key the block does not accept.

    Parameters
    ----------
    block : str
        Keyword of the block whose option list is being parsed
    option_key : str
        The unrecognized key
    position : int, optional
        Offset of the key
    line, column : int, optional
        Line and column of the key

    """

    error_kind = "UnknownOption"

    def __init__(
        self,
        block: str,
        option_key: str,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Initialize the unknown option error."""
        super().__init__(
            f"Unknown option '{option_key}' for {{{block}}} block",
            parsing_stage="options",
            position=position,
            line=line,
            column=column,
            block=block,
        )
        self.option_key = option_key


class MalformedOptionValueError(ParsingError):
    """Exception raised when a known option key has a value of the wrong form.

    Parameters
    ----------
    block : str
        Keyword of the block whose option list is being parsed
    option_key : str
        The option key
    option_value : str
        The offending value text
    expected : str
        Description of the expected form
    position : int, optional
        Offset of the value
    line, column : int, optional
        Line and column of the value

    """

    error_kind = "MalformedOptionValue"

    def __init__(
        self,
        block: str,
        option_key: str,
        option_value: str,
        expected: str,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Initialize the malformed option value error."""
        super().__init__(
            f"Malformed value {option_value!r} for option '{option_key}' of {{{block}}} block, expected {expected}",
            parsing_stage="options",
            position=position,
            line=line,
            column=column,
            block=block,
        )
        self.option_key = option_key
        self.option_value = option_value
        self.expected = expected


class IllegalHeadingLevelError(ParsingError):
    """Exception raised for a heading level outside 1-6.

    The heading grammar only accepts the digits 1 to 6, so parsing never
    produces this error; it is raised when a Heading node is built with an
    out-of-range level.

    Parameters
    ----------
    level : int
        The rejected heading level

    """

    error_kind = "IllegalHeadingLevel"

    def __init__(
        self,
        level: int,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Initialize the illegal heading level error."""
        super().__init__(
            f"Heading level must be 1-6, got {level}",
            parsing_stage="heading",
            position=position,
            line=line,
            column=column,
            block="heading",
        )
        self.level = level


class RenderingError(Markup2MdError):
    """Exception raised when markdown rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The original exception that caused the failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
