"""Loose text comparison for duplicate-title detection.

Pure text operations with no rendering dependencies. Two strings compare
equal when they match after uppercasing and removing whitespace, periods
and colons, so "Definitions:" and "DEFINITIONS" are the same title.
"""
from __future__ import annotations

import re
from collections.abc import Iterable

from contract_render.document_types import Node, node_text

_NOISE_RE = re.compile(r"[\s.:]")
_TRAILING_PUNCT_RE = re.compile(r"[.:]+$")


def normalize(s: str | None) -> str:
    """Uppercase and delete every whitespace, period and colon character."""
    if not s:
        return ""
    return _NOISE_RE.sub("", s.upper())


def strip_trailing_punct(s: str | None) -> str:
    """Remove a trailing run of periods/colons; interior ones are kept."""
    if not s:
        return ""
    return _TRAILING_PUNCT_RE.sub("", s)


def comparable(s: str | None) -> str:
    """Comparison key: trailing punctuation stripped, then normalized."""
    return normalize(strip_trailing_punct(s))


def same_text(a: str | None, b: str | None) -> bool:
    return comparable(a) == comparable(b)


def extract_plain_text(nodes: Iterable[Node]) -> str:
    """Concatenate the text of text-bearing nodes and trim the result.

    Containers and mentions contribute nothing, even if they hold text
    further down the tree.
    """
    parts: list[str] = []
    for node in nodes:
        text = node_text(node)
        if text is not None:
            parts.append(text)
    return "".join(parts).strip()
