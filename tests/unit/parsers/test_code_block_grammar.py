#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the code block grammar."""

import pytest

from markup2md.ast import CodeBlock
from markup2md.exceptions import MalformedOptionValueError, UnknownOptionError, UnterminatedBlockError
from markup2md.parsers.grammars import CodeBlockGrammar, MarkupSource


def match_code(text: str, pos: int = 0):
    return CodeBlockGrammar().match(MarkupSource(text), pos)


@pytest.mark.unit
class TestCodeBlockRecognition:
    """Test recognition of {code} blocks."""

    def test_basic_block(self) -> None:
        """Test a block without options."""
        text = "{code}\nHello\n{code}"
        match = match_code(text)

        assert match is not None
        assert isinstance(match.node, CodeBlock)
        assert match.node.content == "Hello\n"
        assert match.node.language is None
        assert match.end == len(text)

    def test_language_option(self) -> None:
        """Test that the language option reaches the node."""
        match = match_code("{code:language=python}\nprint(1)\n{code}")
        assert match is not None
        assert match.node.language == "python"
        assert match.node.content == "print(1)\n"

    def test_empty_option_list(self) -> None:
        """Test that {code:} is a block with no options."""
        match = match_code("{code:}\nx\n{code}")
        assert match is not None
        assert match.node.language is None

    def test_whitespace_before_colon(self) -> None:
        """Test that whitespace between keyword and option list is skipped."""
        match = match_code("{code :language=go}\nx\n{code}")
        assert match is not None
        assert match.node.language == "go"

    def test_all_options_accepted(self) -> None:
        """Test that every code option is validated but only language is kept."""
        options = "title=Demo|linenumbers=true|language=rust|firstline=10|collapse=false"
        match = match_code("{code:" + options + "}\nfn main() {}\n{code}")
        assert match is not None
        assert match.node.language == "rust"
        assert match.node.content == "fn main() {}\n"

    def test_first_language_wins(self) -> None:
        """Test that the first of repeated language options is used."""
        match = match_code("{code:language=c|title=x|language=go}\nx\n{code}")
        assert match is not None
        assert match.node.language == "c"

    def test_indentation_of_first_line_kept(self) -> None:
        """Test that only the tag line's trailing blanks and newline are skipped."""
        match = match_code("{code}  \n    indented\n{code}")
        assert match is not None
        assert match.node.content == "    indented\n"

    def test_content_on_tag_line(self) -> None:
        """Test content that starts on the opening tag's line."""
        match = match_code("{code}x = 1{code}")
        assert match is not None
        assert match.node.content == "x = 1"

    def test_empty_content(self) -> None:
        """Test a block with no content."""
        match = match_code("{code}\n{code}")
        assert match is not None
        assert match.node.content == ""

    def test_multiline_content_verbatim(self) -> None:
        """Test that content, including blank lines and braces, is kept verbatim."""
        content = "def f():\n\n    return {'a': 1}\n"
        match = match_code("{code}\n" + content + "{code}")
        assert match is not None
        assert match.node.content == content

    def test_closing_tag_line_consumed(self) -> None:
        """Test that only the closing tag line's trailing blanks and newline are consumed."""
        text = "{code}\nx\n{code}  \n\n  next"
        match = match_code(text)
        assert match is not None
        assert text[match.end :] == "\n  next"

    def test_closing_tag_at_end_of_input(self) -> None:
        """Test a closing tag followed only by blanks."""
        text = "{code}\nx\n{code} \t"
        match = match_code(text)
        assert match is not None
        assert match.end == len(text)

    @pytest.mark.parametrize("text", ["{codex}\nx\n{codex}", "{code-block}", "{cod}", "code}", "plain text"])
    def test_non_matches(self, text: str) -> None:
        """Test that other text does not match and raises nothing."""
        assert match_code(text) is None


@pytest.mark.unit
class TestCodeBlockErrors:
    """Test structured errors raised after the opening tag is recognized."""

    def test_unterminated_block(self) -> None:
        """Test that a missing closing tag raises UnterminatedBlockError."""
        with pytest.raises(UnterminatedBlockError) as exc_info:
            match_code("{code}\nbody")

        error = exc_info.value
        assert error.error_kind == "UnterminatedBlock"
        assert error.block == "code"
        assert error.position == 0
        assert (error.line, error.column) == (1, 1)

    def test_unterminated_location_points_to_opening_tag(self) -> None:
        """Test the reported location of an unterminated block in the middle of a document."""
        text = "line one\n{code}\nbody"
        with pytest.raises(UnterminatedBlockError) as exc_info:
            match_code(text, 9)

        assert exc_info.value.line == 2
        assert exc_info.value.column == 1

    def test_eof_inside_option_list(self) -> None:
        """Test that input ending inside the option list is unterminated."""
        with pytest.raises(UnterminatedBlockError):
            match_code("{code:language=python")

    def test_eof_after_key(self) -> None:
        """Test that input ending inside an option key is unterminated."""
        with pytest.raises(UnterminatedBlockError):
            match_code("{code:lang")

    def test_unknown_option(self) -> None:
        """Test that an unknown key raises UnknownOptionError."""
        with pytest.raises(UnknownOptionError) as exc_info:
            match_code("{code:theme=dark}\nx\n{code}")

        assert exc_info.value.option_key == "theme"
        assert exc_info.value.position == len("{code:")
        assert exc_info.value.error_kind == "UnknownOption"

    def test_admonition_option_unknown_for_code(self) -> None:
        """Test that show_icon is not a code block option."""
        with pytest.raises(UnknownOptionError):
            match_code("{code:show_icon=true}\nx\n{code}")

    def test_unknown_option_after_valid_one(self) -> None:
        """Test that a bad key later in the list is still reported."""
        with pytest.raises(UnknownOptionError) as exc_info:
            match_code("{code:language=c|colour=red}\nx\n{code}")
        assert exc_info.value.option_key == "colour"

    @pytest.mark.parametrize(
        "options,key",
        [
            ("linenumbers=yes", "linenumbers"),
            ("collapse=1", "collapse"),
            ("firstline=ten", "firstline"),
            ("firstline=-1", "firstline"),
            (f"firstline={2**64}", "firstline"),
            ("language=c++", "language"),
            ("language=", "language"),
        ],
    )
    def test_malformed_values(self, options: str, key: str) -> None:
        """Test that values of the wrong form raise MalformedOptionValueError."""
        with pytest.raises(MalformedOptionValueError) as exc_info:
            match_code("{code:" + options + "}\nx\n{code}")

        assert exc_info.value.option_key == key
        assert exc_info.value.error_kind == "MalformedOptionValue"

    def test_key_without_value(self) -> None:
        """Test that a known key without '=' is malformed."""
        with pytest.raises(MalformedOptionValueError) as exc_info:
            match_code("{code:language}\nx\n{code}")
        assert "'='" in exc_info.value.expected

    def test_malformed_value_position(self) -> None:
        """Test that the error points at the start of the offending value."""
        with pytest.raises(MalformedOptionValueError) as exc_info:
            match_code("{code:firstline=x}\nbody\n{code}")

        assert exc_info.value.position == len("{code:firstline=")
        assert exc_info.value.option_value == "x"

    def test_options_validated_for_empty_block(self) -> None:
        """Test that options are validated even when the block has no content."""
        with pytest.raises(MalformedOptionValueError):
            match_code("{code:collapse=maybe}\n{code}")
