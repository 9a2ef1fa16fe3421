"""Clause rendering: numbered title, body blocks and lettered sub-clauses.

A clause renders as an optional heading line followed by its body. Body
children are dispatched by kind:

  heading-4  — text runs repeating the clause title are dropped; other
               children are kept; nothing is emitted if none remain
  paragraph  — suppressed when it merely restates the clause title
  list       — one bullet per item (item content is unwrapped one level)
  clause     — a sub-clause line labeled (a), (b), ... in child order

Sub-clause lettering follows the alpha enumerator convention used in
contracts: a..z, then aa, bb, ..., zz.
"""
from __future__ import annotations

import logging

from contract_render.document_types import (
    Element,
    Fragment,
    Mention,
    Node,
    RenderedUnit,
    node_text,
)
from contract_render.inline import render_inline
from contract_render.render_config import DEFAULT_CONFIG, RenderConfig
from contract_render.textnorm import extract_plain_text, same_text

log = logging.getLogger(__name__)


def sub_clause_label(n: int) -> str:
    """Letter for the n-th sub-clause: 1 -> a, 26 -> z, 27 -> aa, 52 -> zz.

    Past 52 the decimal ordinal is used.
    """
    if 1 <= n <= 26:
        return chr(96 + n)
    if 27 <= n <= 52:
        c = chr(96 + n - 26)
        return c + c
    return str(n)


def clause_title_label(ordinal: int | None) -> str | None:
    """Numeric label for a zero-based clause ordinal ("1." for 0)."""
    if ordinal is None:
        return None
    return f"{ordinal + 1}."


def render_clause(
    block: Element,
    ordinal: int | None = None,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> list[RenderedUnit]:
    """Render one clause instance.

    Args:
        block: The clause element.
        ordinal: Zero-based position among numbered clauses, or None for
            an unnumbered clause.
        config: Title vocabularies.

    Returns:
        The title line (if the clause has a title) followed by body units.
    """
    units: list[RenderedUnit] = []
    title = block.title
    if title:
        units.append(RenderedUnit(
            role="heading",
            content=(Fragment(text=title),),
            label=clause_title_label(ordinal),
        ))

    force_plain = config.is_plain_body(title)
    sub_clause_count = 0

    for child in block.child_nodes:
        if not isinstance(child, Element):
            continue
        match child.kind:
            case "heading-4":
                kept = [c for c in child.child_nodes if not _repeats_title(c, title)]
                if not kept:
                    log.debug("Heading repeats clause title %r; skipped", title)
                    continue
                units.append(RenderedUnit(
                    role="paragraph",
                    content=render_inline(kept, force_plain),
                ))
            case "paragraph":
                if same_text(extract_plain_text(child.child_nodes), title):
                    log.debug("Paragraph restates clause title %r; skipped", title)
                    continue
                units.append(RenderedUnit(
                    role="paragraph",
                    content=render_inline(child.child_nodes, force_plain),
                ))
            case "list":
                units.append(RenderedUnit(role="list", items=_list_items(child)))
            case "clause":
                sub_clause_count += 1
                units.append(RenderedUnit(
                    role="labeled-line",
                    label=f"({sub_clause_label(sub_clause_count)})",
                    content=render_inline(_first_paragraph_children(child), True),
                ))
            case _:
                log.debug("Ignoring %r child in clause %r", child.type_name, title)
    return units


def _repeats_title(node: Node, title: str | None) -> bool:
    text = node_text(node)
    if text is None:
        return False
    return same_text(text, title)


def _list_items(block: Element) -> tuple[tuple[Fragment, ...], ...]:
    items: list[tuple[Fragment, ...]] = []
    for item in block.child_nodes:
        if item is None:
            continue
        content: tuple[Node, ...] = ()
        if isinstance(item, Element) and item.child_nodes:
            wrapper = item.child_nodes[0]
            if isinstance(wrapper, Element):
                content = wrapper.child_nodes
            elif isinstance(wrapper, Mention):
                content = wrapper.children
        items.append(render_inline(content))
    return tuple(items)


def _first_paragraph_children(block: Element) -> tuple[Node, ...]:
    for child in block.child_nodes:
        if isinstance(child, Element) and child.kind == "paragraph":
            return child.child_nodes
    return ()
