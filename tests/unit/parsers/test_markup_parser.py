#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the markup parser driver."""

import io
from pathlib import Path

import pytest

from markup2md.ast import Admonition, AdmonitionKind, CodeBlock, Document, Heading, PlainText
from markup2md.exceptions import InvalidOptionsError, UnterminatedBlockError, ValidationError
from markup2md.options import MarkdownRendererOptions, MarkupParserOptions
from markup2md.parsers.grammars import HeadingGrammar
from markup2md.parsers.markup import DEFAULT_GRAMMARS, MarkupParser, normalize_line_endings


def node_types(doc: Document) -> list[str]:
    return [type(node).__name__ for node in doc.children]


@pytest.mark.unit
class TestMarkupParserBasics:
    """Test splitting documents into nodes."""

    def test_empty_input(self) -> None:
        """Test that empty input yields an empty document."""
        doc = MarkupParser().parse("")
        assert isinstance(doc, Document)
        assert doc.children == []

    def test_plain_lines(self) -> None:
        """Test that unrecognized lines become one PlainText each."""
        doc = MarkupParser().parse("first\nsecond\n")
        assert doc.children == [
            PlainText(text="first", source_location=doc.children[0].source_location),
            PlainText(text="second", source_location=doc.children[1].source_location),
        ]

    def test_last_line_without_newline(self) -> None:
        """Test that a final line without a terminator is still plain text."""
        doc = MarkupParser().parse("only line")
        assert len(doc.children) == 1
        assert doc.children[0].text == "only line"

    def test_blank_lines_are_empty_plain_text(self) -> None:
        """Test that blank lines are kept as empty PlainText nodes."""
        doc = MarkupParser().parse("a\n\nb")
        assert [node.text for node in doc.children] == ["a", "", "b"]

    def test_mixed_document_order(self, ticket_description: str) -> None:
        """Test that blocks and plain lines keep document order."""
        doc = MarkupParser().parse(ticket_description)
        assert node_types(doc) == [
            "Heading",
            "PlainText",
            "Heading",
            "CodeBlock",
            "Admonition",
            "Admonition",
            "PlainText",
        ]
        assert doc.children[3].language == "bash"
        assert doc.children[4].kind is AdmonitionKind.WARNING
        assert doc.children[5].kind is AdmonitionKind.NOTE

    def test_block_mid_line_is_plain_text(self) -> None:
        """Test that blocks are only recognized at the start of a line."""
        doc = MarkupParser().parse("see {code}x{code} here\n")
        assert node_types(doc) == ["PlainText"]
        assert doc.children[0].text == "see {code}x{code} here"

    def test_heading_without_newline_is_plain_text(self) -> None:
        """Test that a heading on the last line without a newline is plain text."""
        doc = MarkupParser().parse("h1. Title")
        assert node_types(doc) == ["PlainText"]

    def test_unknown_tags_are_plain_text(self) -> None:
        """Test that tags outside the recognized set are plain text, not errors."""
        doc = MarkupParser().parse("{panel}\nx\n{panel}\n{quote}q{quote}")
        assert node_types(doc) == ["PlainText", "PlainText", "PlainText", "PlainText"]

    def test_block_followed_directly_by_text(self) -> None:
        """Test that text after a closing tag on the same line starts a new node."""
        doc = MarkupParser().parse("{info}\nx\n{info}after")
        assert node_types(doc) == ["Admonition", "PlainText"]
        assert doc.children[1].text == "after"

    def test_blank_line_after_block_kept(self) -> None:
        """Test that a blank line after a closing tag stays a PlainText node."""
        doc = MarkupParser().parse("{code}\nx\n{code}\n\nafter\n")
        assert node_types(doc) == ["CodeBlock", "PlainText", "PlainText"]
        assert [node.text for node in doc.children[1:]] == ["", "after"]

    def test_indented_line_after_block_kept(self) -> None:
        """Test that the line after a closing tag keeps its indentation."""
        doc = MarkupParser().parse("{info}\nX\n{info}\n    indented\n")
        assert node_types(doc) == ["Admonition", "PlainText"]
        assert doc.children[1].text == "    indented"

    def test_indented_opening_tag(self) -> None:
        """Test that code blocks and admonitions may be indented."""
        doc = MarkupParser().parse("  {code}\nx\n{code}\n\t{note:title=N}\ny\n{note}\n")
        assert node_types(doc) == ["CodeBlock", "Admonition"]
        assert doc.children[0].content == "x\n"
        assert doc.children[0].source_location.column == 3
        assert doc.children[1].title == "N"

    def test_indented_heading_is_plain_text(self) -> None:
        """Test that headings must start their line."""
        doc = MarkupParser().parse("  h1. Title\n")
        assert node_types(doc) == ["PlainText"]
        assert doc.children[0].text == "  h1. Title"

    def test_indented_unknown_tag_keeps_indentation(self) -> None:
        """Test that an indented line that is not a block is kept whole."""
        doc = MarkupParser().parse("  {codex}\n")
        assert doc.children[0].text == "  {codex}"

    def test_source_locations(self) -> None:
        """Test that nodes record where they started."""
        doc = MarkupParser().parse("intro\n{tip}\nx\n{tip}\nh2. End\n")
        tip = doc.children[1]
        heading = doc.children[2]

        assert tip.source_location.line == 2
        assert tip.source_location.offset == len("intro\n")
        assert heading.source_location.line == 5


@pytest.mark.unit
class TestMarkupParserPriority:
    """Test the grammar priority order."""

    def test_default_grammar_order(self) -> None:
        """Test that headings are tried first, then code, then admonitions."""
        names = [grammar.name for grammar in DEFAULT_GRAMMARS]
        assert names == ["heading", "code", "info", "tip", "warning", "note"]

    def test_custom_grammars(self) -> None:
        """Test that a parser restricted to headings treats blocks as text."""
        parser = MarkupParser(grammars=[HeadingGrammar()])
        doc = parser.parse("h1. A\n{code}\nx\n{code}")
        assert node_types(doc) == ["Heading", "PlainText", "PlainText", "PlainText"]

    def test_error_stops_parse(self) -> None:
        """Test that a block error fails the whole parse."""
        with pytest.raises(UnterminatedBlockError) as exc_info:
            MarkupParser().parse("h1. Fine\n{code}\nbody")
        assert exc_info.value.line == 2

    def test_indented_unterminated_block_location(self) -> None:
        """Test that an indented unterminated block reports its tag position."""
        with pytest.raises(UnterminatedBlockError) as exc_info:
            MarkupParser().parse("ok\n  {warning}\nbody")
        assert (exc_info.value.line, exc_info.value.column) == (2, 3)

    def test_error_after_valid_blocks(self) -> None:
        """Test that valid blocks before an error do not produce partial output."""
        with pytest.raises(UnterminatedBlockError):
            MarkupParser().parse("{info}\nok\n{info}\n{note}\nbroken")


@pytest.mark.unit
class TestLineEndings:
    """Test CRLF and CR handling."""

    def test_normalize_line_endings(self) -> None:
        """Test the normalization helper."""
        assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_crlf_normalized_by_default(self) -> None:
        """Test that CRLF input parses like LF input."""
        doc = MarkupParser().parse("h1. Title\r\n{code}\r\nx\r\n{code}\r\n")
        assert node_types(doc) == ["Heading", "CodeBlock"]
        assert doc.children[0].text == "Title"
        assert doc.children[1].content == "x\n"

    def test_normalization_disabled(self) -> None:
        """Test that CR stays in the text when normalization is off."""
        parser = MarkupParser(MarkupParserOptions(normalize_line_endings=False))
        doc = parser.parse("h1. Title\r\n")
        assert isinstance(doc.children[0], Heading)
        assert doc.children[0].text == "Title\r"


@pytest.mark.unit
class TestMarkupParserInputs:
    """Test the accepted input types."""

    def test_bytes_input(self) -> None:
        """Test that bytes are decoded."""
        doc = MarkupParser().parse(b"h1. Title\n")
        assert doc.children[0].text == "Title"

    def test_path_input(self, temp_dir: Path) -> None:
        """Test that a Path is read from disk."""
        path = temp_dir / "ticket.txt"
        path.write_text("{note}\nfrom file\n{note}", encoding="utf-8")

        doc = MarkupParser().parse(path)
        assert isinstance(doc.children[0], Admonition)
        assert doc.children[0].content == "from file\n"

    def test_string_is_never_a_path(self, temp_dir: Path) -> None:
        """Test that a str is parsed as markup even if it names a file."""
        path = temp_dir / "ticket.txt"
        path.write_text("h1. Hidden\n", encoding="utf-8")

        doc = MarkupParser().parse(str(path))
        assert node_types(doc) == ["PlainText"]
        assert doc.children[0].text == str(path)

    def test_text_stream_input(self) -> None:
        """Test reading from a text stream."""
        doc = MarkupParser().parse(io.StringIO("{code}\ns\n{code}"))
        assert isinstance(doc.children[0], CodeBlock)

    def test_binary_stream_input(self) -> None:
        """Test reading from a binary stream."""
        doc = MarkupParser().parse(io.BytesIO(b"h2. Bytes\n"))
        assert doc.children[0].level == 2

    def test_unsupported_input_type(self) -> None:
        """Test that unsupported input raises ValidationError."""
        with pytest.raises(ValidationError):
            MarkupParser().parse(42)  # type: ignore[arg-type]

    def test_wrong_options_type(self) -> None:
        """Test that renderer options are rejected by the parser."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            MarkupParser(MarkdownRendererOptions())  # type: ignore[arg-type]
        assert exc_info.value.expected_type is MarkupParserOptions
