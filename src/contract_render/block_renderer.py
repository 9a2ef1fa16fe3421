"""Dispatch of top-level document blocks to their rendering rule.

Rules, in precedence order:
  1. heading-1                       → document title line
  2. paragraph whose first child is
     a clause                        → every child rendered as a clause
                                       with the fixed grouped ordinal
  3. paragraph                       → one paragraph line
  4. generic-block titled "Parties"  → uppercased heading plus one line per
                                       line break in the first child's text
  5. clause                          → numbered when its title is one of
                                       the recognized clause titles
  6. anything else                   → nothing
"""
from __future__ import annotations

import logging

from contract_render.clause_renderer import render_clause
from contract_render.document_types import (
    Element,
    Fragment,
    Node,
    RenderedUnit,
    is_kind,
)
from contract_render.inline import render_inline
from contract_render.line_splitter import split_lines
from contract_render.render_config import DEFAULT_CONFIG, RenderConfig

log = logging.getLogger(__name__)


def render_block(
    block: Node,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> list[RenderedUnit]:
    """Render one block. Returns an empty list when the block renders nothing."""
    if not isinstance(block, Element):
        return []

    match block.kind:
        case "heading-1":
            return [RenderedUnit(role="title", content=render_inline(block.child_nodes))]
        case "paragraph" if block.child_nodes and is_kind(block.child_nodes[0], "clause"):
            return _render_grouped_clauses(block, config)
        case "paragraph":
            return [RenderedUnit(role="paragraph", content=render_inline(block.child_nodes))]
        case "generic-block" if block.title == config.parties_title:
            return _render_parties(block)
        case "clause":
            return render_clause(block, config.clause_ordinal(block.title), config=config)
        case _:
            log.debug("No rendering rule for block type %r", block.type_name)
            return []


def _render_grouped_clauses(block: Element, config: RenderConfig) -> list[RenderedUnit]:
    units: list[RenderedUnit] = []
    for child in block.child_nodes:
        if isinstance(child, Element):
            units.extend(
                render_clause(child, config.grouped_clause_ordinal, config=config)
            )
    return units


def _render_parties(block: Element) -> list[RenderedUnit]:
    title = block.title or ""
    content: tuple[Node, ...] = ()
    if block.child_nodes and isinstance(block.child_nodes[0], Element):
        content = block.child_nodes[0].child_nodes

    units = [RenderedUnit(role="heading", content=(Fragment(text=title.upper()),))]
    for line in split_lines(content, title):
        units.append(RenderedUnit(role="paragraph", content=render_inline(line)))
    return units
