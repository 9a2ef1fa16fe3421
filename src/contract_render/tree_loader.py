"""Coerce JSON document exports into the typed document tree.

The export format is a list whose first element holds the document's
top-level blocks under ``children``. Nodes are mappings with an optional
``type`` string; anything that does not fit the model is dropped rather
than rejected, so a malformed export renders as an empty document.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from contract_render.document_types import (
    Document,
    Element,
    Mention,
    Node,
    TextRun,
    kind_for_type,
)
from contract_render.io_utils import load_json

log = logging.getLogger(__name__)


def load_document(path: Path) -> Document:
    """Read a document export from disk.

    File-system and JSON decode errors propagate; shape problems do not.
    """
    return document_from_json(load_json(path))


def document_from_json(value: Any) -> Document:
    """Typed Document from an export value; empty for any malformed shape."""
    if not isinstance(value, list) or not value:
        log.debug("Document export is not a non-empty list; rendering nothing")
        return ()
    root = value[0]
    if not isinstance(root, dict):
        log.debug("Document root is not an object; rendering nothing")
        return ()
    children = root.get("children")
    if not isinstance(children, list):
        log.debug("Document root has no children list; rendering nothing")
        return ()
    return tuple(node_from_json(raw) for raw in children)


def node_from_json(raw: Any) -> Node:
    """Coerce one raw node. Unusable values become None (skipped downstream)."""
    if isinstance(raw, str):
        return raw
    if not isinstance(raw, dict):
        return None

    type_name = raw.get("type")
    children = _children(raw)
    if type_name == "mention":
        return Mention(color=_opt_str(raw, "color"), children=children or ())
    if not isinstance(type_name, str):
        if children is None:
            return TextRun(
                text=_opt_str(raw, "text") or "",
                bold=raw.get("bold") is True,
                underline=raw.get("underline") is True,
            )
        type_name = ""
    return Element(
        kind=kind_for_type(type_name),
        type_name=type_name,
        title=_opt_str(raw, "title"),
        text=_opt_str(raw, "text"),
        bold=raw.get("bold") is True,
        underline=raw.get("underline") is True,
        children=children,
    )


def _children(raw: dict[str, Any]) -> tuple[Node, ...] | None:
    value = raw.get("children")
    if not isinstance(value, list):
        return None
    return tuple(node_from_json(c) for c in value)


def _opt_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    return value if isinstance(value, str) else None
