"""Tests for contract_render.line_splitter."""
from __future__ import annotations

from contract_render.document_types import Element, Mention, TextRun
from contract_render.line_splitter import split_lines


class TestSplitLines:
    def test_no_breaks_single_line(self) -> None:
        nodes = [TextRun(text="Acme"), TextRun(text=" Corp", bold=True)]
        assert split_lines(nodes) == [nodes]

    def test_splits_on_embedded_breaks(self) -> None:
        lines = split_lines([TextRun(text="Acme Corp\n123 Main St")])
        assert lines == [[TextRun(text="Acme Corp")], [TextRun(text="123 Main St")]]

    def test_consecutive_breaks_collapse(self) -> None:
        lines = split_lines([TextRun(text="one\n\n\ntwo")])
        assert [[n.text for n in line] for line in lines] == [["one"], ["two"]]

    def test_styling_preserved_on_segments(self) -> None:
        lines = split_lines([TextRun(text="A\nB", bold=True, underline=True)])
        assert lines == [
            [TextRun(text="A", bold=True, underline=True)],
            [TextRun(text="B", bold=True, underline=True)],
        ]

    def test_break_joins_preceding_nodes(self) -> None:
        nodes = [
            TextRun(text="Name: ", bold=True),
            TextRun(text="Acme\nAddress: "),
            TextRun(text="Main St"),
        ]
        lines = split_lines(nodes)
        assert lines == [
            [TextRun(text="Name: ", bold=True), TextRun(text="Acme")],
            [TextRun(text="Address: "), TextRun(text="Main St")],
        ]

    def test_leading_and_trailing_breaks(self) -> None:
        lines = split_lines([TextRun(text="\nA\n")])
        assert lines == [[TextRun(text="A")]]

    def test_mention_kept_whole(self) -> None:
        mention = Mention(color="red", children=(TextRun(text="x\ny"),))
        lines = split_lines([TextRun(text="a\n"), mention])
        assert lines == [[TextRun(text="a")], [mention]]

    def test_bare_string_and_element_split(self) -> None:
        lines = split_lines(["a\nb", Element(kind="other", text="c\nd", bold=True)])
        assert lines == [
            ["a"],
            ["b", Element(kind="other", text="c", bold=True)],
            [Element(kind="other", text="d", bold=True)],
        ]

    def test_empty_input(self) -> None:
        assert split_lines([]) == []


class TestTitleFilter:
    def test_drops_repeated_title_line(self) -> None:
        lines = split_lines([TextRun(text="PARTIES\nAcme Corp\n123 Main St")], "Parties")
        assert lines == [[TextRun(text="Acme Corp")], [TextRun(text="123 Main St")]]

    def test_title_match_is_loose(self) -> None:
        lines = split_lines([TextRun(text=" Parties: \nAcme")], "Parties")
        assert lines == [[TextRun(text="Acme")]]

    def test_multi_node_line_not_dropped(self) -> None:
        nodes = [TextRun(text="Parties"), TextRun(text="!")]
        assert split_lines(nodes, "Parties") == [nodes]

    def test_no_title_keeps_everything(self) -> None:
        lines = split_lines([TextRun(text="PARTIES\nAcme")])
        assert len(lines) == 2
