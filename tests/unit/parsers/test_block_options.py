#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for block option parsing and first-match-wins lookup."""

import pytest

from markup2md.parsers.block_options import (
    ADMONITION_OPTIONS,
    CODE_BLOCK_OPTIONS,
    CollapseOption,
    FirstLineOption,
    LanguageOption,
    LineNumbersOption,
    ShowIconOption,
    TitleOption,
    find_first_option,
    parse_boolean,
    parse_identifier,
    parse_unsigned,
)


@pytest.mark.unit
class TestFindFirstOption:
    """Test the first-match-wins option lookup."""

    def test_first_of_repeated_kind_wins(self) -> None:
        """Test that the earliest option of a type is returned."""
        options = [TitleOption("first"), LanguageOption("python"), TitleOption("second")]
        assert find_first_option(options, TitleOption) == TitleOption("first")

    def test_other_kinds_do_not_interfere(self) -> None:
        """Test that options of other types between repeats are skipped."""
        options = [LanguageOption("c"), TitleOption("t"), LanguageOption("rust")]
        assert find_first_option(options, LanguageOption) == LanguageOption("c")

    def test_missing_kind_returns_none(self) -> None:
        """Test that None is returned when no option has the type."""
        assert find_first_option([TitleOption("t")], ShowIconOption) is None

    def test_empty_options(self) -> None:
        """Test lookup in an empty option list."""
        assert find_first_option([], TitleOption) is None


@pytest.mark.unit
class TestValueParsers:
    """Test option value parsers."""

    @pytest.mark.parametrize("raw,expected", [("true", True), ("false", False), ("true  ", True)])
    def test_parse_boolean(self, raw: str, expected: bool) -> None:
        """Test the accepted boolean tokens."""
        assert parse_boolean(raw) is expected

    @pytest.mark.parametrize("raw", ["True", "yes", "1", "", " true", "falsey"])
    def test_parse_boolean_rejects(self, raw: str) -> None:
        """Test that anything but true/false is rejected."""
        with pytest.raises(ValueError, match="'true' or 'false'"):
            parse_boolean(raw)

    @pytest.mark.parametrize("raw", ["python", "objective_c", "_private", "C99", "js "])
    def test_parse_identifier(self, raw: str) -> None:
        """Test valid language identifiers."""
        assert parse_identifier(raw) == raw.rstrip()

    @pytest.mark.parametrize("raw", ["", "9lives", "c++", "objective-c", "two words"])
    def test_parse_identifier_rejects(self, raw: str) -> None:
        """Test invalid language identifiers."""
        with pytest.raises(ValueError, match="identifier"):
            parse_identifier(raw)

    @pytest.mark.parametrize("raw,expected", [("0", 0), ("42", 42), ("007", 7), (str(2**64 - 1), 2**64 - 1)])
    def test_parse_unsigned(self, raw: str, expected: int) -> None:
        """Test unsigned integers up to the 64-bit maximum."""
        assert parse_unsigned(raw) == expected

    @pytest.mark.parametrize("raw", ["", "-1", "+3", "1.5", "ten", str(2**64)])
    def test_parse_unsigned_rejects(self, raw: str) -> None:
        """Test values that are not unsigned 64-bit integers."""
        with pytest.raises(ValueError):
            parse_unsigned(raw)


@pytest.mark.unit
class TestOptionTables:
    """Test the per-block option key tables."""

    def test_code_block_keys(self) -> None:
        """Test that code blocks accept exactly their five keys."""
        assert set(CODE_BLOCK_OPTIONS) == {"title", "linenumbers", "language", "firstline", "collapse"}

    def test_admonition_keys(self) -> None:
        """Test that admonitions accept only title and show_icon."""
        assert set(ADMONITION_OPTIONS) == {"title", "show_icon"}

    def test_code_block_factories(self) -> None:
        """Test that each code block factory builds its option type."""
        assert CODE_BLOCK_OPTIONS["title"]("My code") == TitleOption("My code")
        assert CODE_BLOCK_OPTIONS["linenumbers"]("true") == LineNumbersOption(True)
        assert CODE_BLOCK_OPTIONS["language"]("go") == LanguageOption("go")
        assert CODE_BLOCK_OPTIONS["firstline"]("10") == FirstLineOption(10)
        assert CODE_BLOCK_OPTIONS["collapse"]("false") == CollapseOption(False)

    def test_title_kept_verbatim(self) -> None:
        """Test that title values keep their surrounding whitespace."""
        assert ADMONITION_OPTIONS["title"](" spaced ") == TitleOption(" spaced ")
