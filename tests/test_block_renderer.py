"""Tests for contract_render.block_renderer dispatch rules."""
from __future__ import annotations

from contract_render.block_renderer import render_block
from contract_render.document_types import Element, Fragment, Mention, TextRun
from contract_render.render_config import RenderConfig


def _p(*children: object) -> Element:
    return Element(kind="paragraph", type_name="p", children=tuple(children))


def _clause(title: str | None, *children: object) -> Element:
    return Element(kind="clause", type_name="clause", title=title, children=tuple(children))


def _parties(text: str, title: str = "Parties") -> Element:
    return Element(
        kind="generic-block",
        type_name="block",
        title=title,
        children=(_p(TextRun(text=text)),),
    )


class TestHeadingOne:
    def test_title_unit(self) -> None:
        block = Element(kind="heading-1", children=(TextRun(text="Services Agreement", bold=True),))
        (unit,) = render_block(block)
        assert unit.role == "title"
        assert unit.content == (Fragment(text="Services Agreement", bold=True),)


class TestParagraphs:
    def test_plain_paragraph(self) -> None:
        (unit,) = render_block(_p(TextRun(text="Intro", underline=True)))
        assert unit.role == "paragraph"
        assert unit.content[0].underline is True

    def test_empty_paragraph(self) -> None:
        (unit,) = render_block(_p())
        assert unit.content == ()

    def test_grouped_clauses_use_fixed_ordinal(self) -> None:
        block = _p(_clause("Fees"), _clause("Term"), _clause("Key Details"))
        units = render_block(block)
        assert [(u.label, u.plain_text) for u in units] == [
            ("3.", "Fees"),
            ("3.", "Term"),
            ("3.", "Key Details"),
        ]

    def test_grouped_clause_ordinal_configurable(self) -> None:
        config = RenderConfig(grouped_clause_ordinal=4)
        (unit,) = render_block(_p(_clause("Fees")), config=config)
        assert unit.label == "5."

    def test_grouped_clauses_render_bodies(self) -> None:
        block = _p(_clause("Fees", _p("Monthly."), _clause(None, _p("late fee"))))
        units = render_block(block)
        assert [u.role for u in units] == ["heading", "paragraph", "labeled-line"]

    def test_grouped_skips_non_element_children(self) -> None:
        block = _p(_clause("Fees"), "loose text", None)
        assert len(render_block(block)) == 1

    def test_clause_not_first_is_plain_paragraph(self) -> None:
        block = _p(TextRun(text="See below"), _clause("Fees"))
        (unit,) = render_block(block)
        assert unit.role == "paragraph"


class TestParties:
    def test_splits_and_drops_repeated_title(self) -> None:
        units = render_block(_parties("PARTIES\nAcme Corp\n123 Main St"))
        assert [(u.role, u.plain_text) for u in units] == [
            ("heading", "PARTIES"),
            ("paragraph", "Acme Corp"),
            ("paragraph", "123 Main St"),
        ]

    def test_line_styles_preserved(self) -> None:
        block = Element(
            kind="generic-block",
            title="Parties",
            children=(
                _p(
                    TextRun(text="Supplier: ", bold=True),
                    TextRun(text="Acme\nCustomer: "),
                    Mention(color="#0af", children=(TextRun(text="Globex"),)),
                ),
            ),
        )
        units = render_block(block)
        assert len(units) == 3
        assert units[1].content[0].bold is True
        assert units[2].content[1].background_color == "#0af"

    def test_title_is_case_sensitive(self) -> None:
        assert render_block(_parties("A\nB", title="parties")) == []

    def test_no_content(self) -> None:
        block = Element(kind="generic-block", title="Parties", children=())
        (unit,) = render_block(block)
        assert unit.plain_text == "PARTIES"

    def test_custom_parties_title(self) -> None:
        config = RenderConfig(parties_title="Between")
        units = render_block(_parties("Acme\nGlobex", title="Between"), config=config)
        assert [u.plain_text for u in units] == ["BETWEEN", "Acme", "Globex"]

    def test_other_generic_block_renders_nothing(self) -> None:
        block = Element(kind="generic-block", title="Signatures", children=(_p("x"),))
        assert render_block(block) == []


class TestClauses:
    def test_recognized_titles_numbered(self) -> None:
        labels = [
            render_block(_clause(t))[0].label
            for t in ("Key Details", "Definitions", "Agreement to Provide Services")
        ]
        assert labels == ["1.", "2.", "3."]

    def test_other_titles_unnumbered(self) -> None:
        (unit,) = render_block(_clause("Confidentiality"))
        assert unit.label is None

    def test_title_match_is_exact(self) -> None:
        (unit,) = render_block(_clause("key details"))
        assert unit.label is None

    def test_custom_titles(self) -> None:
        config = RenderConfig(clause_titles=("Recitals", "Confidentiality"))
        (unit,) = render_block(_clause("Confidentiality"), config=config)
        assert unit.label == "2."


class TestUnrendered:
    def test_non_element_blocks(self) -> None:
        assert render_block(None) == []
        assert render_block("text") == []
        assert render_block(TextRun(text="run")) == []

    def test_other_kinds(self) -> None:
        assert render_block(Element(kind="list", children=())) == []
        assert render_block(Element(kind="heading-4", children=("x",))) == []
        assert render_block(Element(kind="other", type_name="table")) == []
