"""Tests for contract_render.textnorm module."""
from contract_render.document_types import Element, Mention, TextRun
from contract_render.textnorm import (
    comparable,
    extract_plain_text,
    normalize,
    same_text,
    strip_trailing_punct,
)


class TestNormalize:
    def test_uppercases(self) -> None:
        assert normalize("Key Details") == "KEYDETAILS"

    def test_removes_interior_punctuation(self) -> None:
        assert normalize("Sub.Clause: one") == "SUBCLAUSEONE"

    def test_removes_tabs_and_newlines(self) -> None:
        assert normalize("a\tb\nc") == "ABC"

    def test_none_and_empty(self) -> None:
        assert normalize(None) == ""
        assert normalize("") == ""


class TestStripTrailingPunct:
    def test_strips_trailing_run(self) -> None:
        assert strip_trailing_punct("Definitions:") == "Definitions"
        assert strip_trailing_punct("Term.:.") == "Term"

    def test_interior_untouched(self) -> None:
        assert strip_trailing_punct("Sub.Clause") == "Sub.Clause"

    def test_none(self) -> None:
        assert strip_trailing_punct(None) == ""


class TestComparable:
    def test_title_variants_match(self) -> None:
        assert same_text("Definitions:", "DEFINITIONS")
        assert same_text("Key Details.", "key details")

    def test_different_titles(self) -> None:
        assert not same_text("Definitions", "Key Details")

    def test_missing_title_is_empty(self) -> None:
        assert comparable(None) == ""


class TestExtractPlainText:
    def test_concatenates_and_trims(self) -> None:
        nodes = [TextRun(text="  Hello "), "world  "]
        assert extract_plain_text(nodes) == "Hello world"

    def test_containers_contribute_nothing(self) -> None:
        nodes = [
            TextRun(text="A"),
            Mention(color="#f00", children=(TextRun(text="ignored"),)),
            Element(kind="other", children=(TextRun(text="also ignored"),)),
            Element(kind="other", text="B"),
            None,
        ]
        assert extract_plain_text(nodes) == "AB"

    def test_empty(self) -> None:
        assert extract_plain_text([]) == ""
