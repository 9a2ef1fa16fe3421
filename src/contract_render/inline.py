"""Inline rendering: document nodes to styled fragments.

Each node yields at most one Fragment. Containers keep their nesting as
fragment children so a mention's background color stays on the mention
and never bleeds into its siblings.
"""
from __future__ import annotations

from collections.abc import Iterable

from contract_render.document_types import (
    Element,
    ElementKind,
    Fragment,
    InlineRole,
    Mention,
    Node,
    TextRun,
)


def inline_role(kind: ElementKind) -> InlineRole:
    """Inline display role for an element kind. Unknown kinds render as spans."""
    match kind:
        case "heading-1":
            return "heading-1"
        case "heading-4":
            return "heading-4"
        case "paragraph":
            return "paragraph"
        case _:
            return "span"


def render_inline(nodes: Iterable[Node], force_plain: bool = False) -> tuple[Fragment, ...]:
    """Render an inline node sequence.

    Args:
        nodes: Inline nodes in display order. ``None`` entries are skipped.
        force_plain: Suppress bold/underline for this whole subtree.

    Returns:
        One fragment per non-null node, in input order.
    """
    fragments: list[Fragment] = []
    for node in nodes:
        fragment = render_node(node, force_plain)
        if fragment is not None:
            fragments.append(fragment)
    return tuple(fragments)


def render_node(node: Node, force_plain: bool = False) -> Fragment | None:
    """Render a single node; None for null entries."""
    match node:
        case None:
            return None
        case str():
            return Fragment(text=node)
        case Mention(color=color, children=children):
            # Children go through one at a time so each keeps its own styling.
            rendered: list[Fragment] = []
            for child in children:
                rendered.extend(render_inline([child], force_plain))
            return Fragment(
                role="mention",
                background_color=color,
                children=tuple(rendered),
            )
        case TextRun():
            return Fragment(
                text=node.text,
                bold=node.bold and not force_plain,
                underline=node.underline and not force_plain,
            )
        case Element():
            role = inline_role(node.kind)
            bold = node.bold and not force_plain
            underline = node.underline and not force_plain
            if node.children is not None:
                return Fragment(
                    role=role,
                    bold=bold,
                    underline=underline,
                    children=render_inline(node.children, force_plain),
                )
            return Fragment(role=role, text=node.text or "", bold=bold, underline=underline)
        case _:
            return None
