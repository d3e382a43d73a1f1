#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/parsers/block_options.py
"""Option variants accepted inside ``{code:...}`` and admonition tags.

Options exist only while a block is being parsed. The grammar turns each
``key=value`` item into one of the frozen dataclasses below, in declaration
order, and the block's node is then built from that list with
``find_first_option``. Repeated keys are allowed; the first occurrence wins.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, TypeVar, Union

from markup2md.constants import (
    ADMONITION_OPTION_SHOW_ICON,
    ADMONITION_OPTION_TITLE,
    BOOLEAN_TOKENS,
    CODE_OPTION_COLLAPSE,
    CODE_OPTION_FIRST_LINE,
    CODE_OPTION_LANGUAGE,
    CODE_OPTION_LINE_NUMBERS,
    CODE_OPTION_TITLE,
    MAX_FIRST_LINE,
)

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
UNSIGNED_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class TitleOption:
    """``title=<text>``; valid for code blocks and admonitions."""

    value: str


@dataclass(frozen=True)
class LineNumbersOption:
    """``linenumbers=true|false``."""

    value: bool


@dataclass(frozen=True)
class LanguageOption:
    """``language=<identifier>``; the only code option kept in the AST."""

    value: str


@dataclass(frozen=True)
class FirstLineOption:
    """``firstline=<digits>``, an unsigned 64-bit line number."""

    value: int


@dataclass(frozen=True)
class CollapseOption:
    """``collapse=true|false``."""

    value: bool


@dataclass(frozen=True)
class ShowIconOption:
    """``show_icon=true|false``; valid for admonitions only."""

    value: bool


CodeBlockOption = Union[TitleOption, LineNumbersOption, LanguageOption, FirstLineOption, CollapseOption]
AdmonitionOption = Union[TitleOption, ShowIconOption]
BlockOption = Union[CodeBlockOption, AdmonitionOption]

# Builds an option from the raw value text; raises ValueError naming the expected form
OptionFactory = Callable[[str], BlockOption]

T = TypeVar("T")


def find_first_option(options: Sequence[object], option_type: type[T]) -> Optional[T]:
    """Return the first option of the given type, in declaration order.

    Parameters
    ----------
    options : sequence
        Options as they appeared in the tag, left to right
    option_type : type
        Option class to look for

    Returns
    -------
    option or None
        The earliest matching option; later ones of the same type are ignored

    Examples
    --------
    >>> find_first_option([TitleOption("a"), TitleOption("b")], TitleOption)
    TitleOption(value='a')

    """
    for option in options:
        if isinstance(option, option_type):
            return option
    return None


def parse_boolean(raw: str) -> bool:
    """Parse ``true`` or ``false``; trailing whitespace is tolerated."""
    token = raw.rstrip()
    if token not in BOOLEAN_TOKENS:
        raise ValueError("'true' or 'false'")
    return BOOLEAN_TOKENS[token]


def parse_identifier(raw: str) -> str:
    """Parse a language identifier such as ``python`` or ``objective_c``."""
    token = raw.rstrip()
    if not IDENTIFIER_PATTERN.fullmatch(token):
        raise ValueError("an identifier ([A-Za-z_][A-Za-z0-9_]*)")
    return token


def parse_unsigned(raw: str) -> int:
    """Parse base-10 digits into an unsigned 64-bit integer."""
    token = raw.rstrip()
    if not UNSIGNED_PATTERN.fullmatch(token):
        raise ValueError("unsigned base-10 digits")
    value = int(token)
    if value > MAX_FIRST_LINE:
        raise ValueError(f"an unsigned integer no larger than {MAX_FIRST_LINE}")
    return value


CODE_BLOCK_OPTIONS: Mapping[str, OptionFactory] = {
    CODE_OPTION_TITLE: TitleOption,
    CODE_OPTION_LINE_NUMBERS: lambda raw: LineNumbersOption(parse_boolean(raw)),
    CODE_OPTION_LANGUAGE: lambda raw: LanguageOption(parse_identifier(raw)),
    CODE_OPTION_FIRST_LINE: lambda raw: FirstLineOption(parse_unsigned(raw)),
    CODE_OPTION_COLLAPSE: lambda raw: CollapseOption(parse_boolean(raw)),
}

ADMONITION_OPTIONS: Mapping[str, OptionFactory] = {
    ADMONITION_OPTION_TITLE: TitleOption,
    ADMONITION_OPTION_SHOW_ICON: lambda raw: ShowIconOption(parse_boolean(raw)),
}
