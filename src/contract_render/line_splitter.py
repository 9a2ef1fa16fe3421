"""Split inline runs with embedded line breaks into separate lines.

Used for identity/address blocks (the parties to an agreement) where one
text run holds several logical lines separated by raw newlines.
"""
from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Iterable

from contract_render.document_types import Element, Node, TextRun, node_text
from contract_render.textnorm import normalize

log = logging.getLogger(__name__)

_BREAKS_RE = re.compile(r"[\r\n]+")


def _with_text(node: Node, text: str) -> Node:
    """Copy of *node* carrying *text*, styling preserved."""
    if isinstance(node, (TextRun, Element)):
        return dataclasses.replace(node, text=text)
    return text


def split_lines(nodes: Iterable[Node], title: str | None = None) -> list[list[Node]]:
    """Partition *nodes* into lines at every embedded line break.

    Args:
        nodes: Inline nodes of one block, in display order.
        title: Owning block title. A line made of a single text node equal
            to it (trimmed, normalized) is dropped as a repeated heading.

    Returns:
        Non-empty lines, each a list of nodes.
    """
    lines: list[list[Node]] = []
    current: list[Node] = []

    for node in nodes:
        text = node_text(node)
        if text is None or not _BREAKS_RE.search(text):
            current.append(node)
            continue
        for idx, part in enumerate(_BREAKS_RE.split(text)):
            if idx > 0 and current:
                lines.append(current)
                current = []
            if part:
                current.append(_with_text(node, part))

    if current:
        lines.append(current)

    if title is None:
        return lines
    wanted = normalize(title)
    kept: list[list[Node]] = []
    for line in lines:
        if len(line) == 1:
            text = node_text(line[0])
            if text is not None and normalize(text.strip()) == wanted:
                log.debug("Dropping line repeating block title %r", title)
                continue
        kept.append(line)
    return kept
