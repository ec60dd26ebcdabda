"""
Tests for the plain-text glossary parser.
"""
import pytest

from hyperglossary.core.exceptions import (
    DuplicateTermError,
    EmptyDefinitionError,
    MalformedInputError,
    ParserError,
)
from hyperglossary.parsers.text_parser import GlossaryTextParser


@pytest.fixture
def parser():
    return GlossaryTextParser()


def test_parse_file(parser, sample_file):
    glossary = parser.parse(sample_file)

    assert glossary.as_dict() == {
        "cat": "a small animal",
        "cats": "plural of cat",
        "dog": "a loyal animal, often a pet",
        "pet": "an animal kept for companionship",
    }


def test_last_definition_keeps_final_character(parser):
    glossary = parser.parse_text("cat\nanimal")

    assert glossary["cat"] == "animal"


def test_multi_line_definition(parser):
    glossary = parser.parse_text("cat\na small\nfurry animal\n\ndog\nloyal\n")

    assert glossary["cat"] == "a small furry animal"
    assert glossary["dog"] == "loyal"


def test_extra_blank_lines_between_records(parser):
    glossary = parser.parse_text("\n\ncat\nanimal\n\n\n\ndog\npet\n\n")

    assert sorted(glossary) == ["cat", "dog"]


def test_windows_line_endings(parser):
    glossary = parser.parse_text("cat\r\nanimal\r\n\r\ndog\r\npet\r\n")

    assert glossary.as_dict() == {"cat": "animal", "dog": "pet"}


def test_whitespace_is_trimmed(parser):
    glossary = parser.parse_text("  cat  \n  a small animal  \n")

    assert glossary.as_dict() == {"cat": "a small animal"}


def test_term_at_end_of_input(parser):
    with pytest.raises(MalformedInputError) as exc_info:
        parser.parse_text("cat\nanimal\n\ndog\n")

    assert exc_info.value.line_number == 4


def test_term_followed_by_blank_line(parser):
    with pytest.raises(EmptyDefinitionError) as exc_info:
        parser.parse_text("cat\n\ndog\npet\n")

    assert exc_info.value.term == "cat"


def test_whitespace_only_definition(parser):
    with pytest.raises(EmptyDefinitionError):
        parser.parse_text("cat\n   \n")


def test_duplicate_term(parser):
    with pytest.raises(DuplicateTermError):
        parser.parse_text("cat\nanimal\n\ncat\npet\n")


def test_empty_input(parser):
    assert len(parser.parse_text("")) == 0


def test_missing_file(parser, temp_dir):
    with pytest.raises(ParserError):
        parser.parse(temp_dir / "missing.txt")


def test_directory_is_rejected(parser, temp_dir):
    assert parser.validate_document(temp_dir) is False


def test_undecodable_file(temp_dir):
    path = temp_dir / "latin1.txt"
    path.write_bytes("café\nboisson\n".encode("latin-1"))

    with pytest.raises(ParserError):
        GlossaryTextParser(encoding="utf-8").parse(path)


def test_custom_encoding(temp_dir):
    path = temp_dir / "latin1.txt"
    path.write_bytes("café\nboisson\n".encode("latin-1"))

    glossary = GlossaryTextParser(encoding="latin-1").parse(path)

    assert glossary["café"] == "boisson"
