"""Core types for the contract rendering pipeline.

Every renderer shares these types. The input side is an immutable document
tree, the output side is a flat sequence of presentation instructions. All
dataclasses are frozen and use slots=True; sequences are tuples so every
value is hashable.

Type hierarchy:
  TextRun       — Plain inline leaf run (text + bold/underline flags)
  Element       — Typed container or leaf element (headings, paragraphs, clauses)
  Mention       — Colored atomic inline token
  Node          — Closed union of everything that may sit in a children list
  Fragment      — Rendered inline content (styled text or nested fragments)
  RenderedUnit  — One displayable instruction (title, heading, line, list)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

# ---------------------------------------------------------------------------
# Closed kind vocabularies
# ---------------------------------------------------------------------------

ElementKind: TypeAlias = Literal[
    "heading-1",
    "heading-4",
    "paragraph",
    "list",
    "list-item",
    "clause",
    "generic-block",
    "other",
]
InlineRole: TypeAlias = Literal["heading-1", "heading-4", "paragraph", "span", "mention"]
DisplayRole: TypeAlias = Literal["title", "heading", "paragraph", "list", "labeled-line"]

ELEMENT_KINDS: tuple[ElementKind, ...] = (
    "heading-1",
    "heading-4",
    "paragraph",
    "list",
    "list-item",
    "clause",
    "generic-block",
    "other",
)

# Short tag names used by editor exports, mapped onto the canonical kinds.
KIND_ALIASES: dict[str, ElementKind] = {
    "h1": "heading-1",
    "h4": "heading-4",
    "p": "paragraph",
    "ul": "list",
    "li": "list-item",
    "block": "generic-block",
}


def kind_for_type(type_name: str) -> ElementKind:
    """Map a raw ``type`` string onto its ElementKind ("other" if unknown)."""
    alias = KIND_ALIASES.get(type_name)
    if alias is not None:
        return alias
    for kind in ELEMENT_KINDS:
        if kind == type_name:
            return kind
    return "other"


# ---------------------------------------------------------------------------
# Document tree (input)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextRun:
    """Untyped inline leaf: ``{text, bold?, underline?}``."""
    text: str
    bold: bool = False
    underline: bool = False


@dataclass(frozen=True, slots=True)
class Mention:
    """Inline token displayed as a colored span around its own children."""
    color: str | None = None
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Element:
    """Typed document element — block-level or inline.

    ``children is None`` marks a leaf element whose ``text`` is authoritative.
    An empty tuple is an empty container and renders nothing.
    """
    kind: ElementKind
    type_name: str = ""        # Raw type string as it appeared in the source
    title: str | None = None
    text: str | None = None
    bold: bool = False
    underline: bool = False
    children: tuple[Node, ...] | None = None

    @property
    def child_nodes(self) -> tuple[Node, ...]:
        """Children, or an empty tuple for leaf elements."""
        return self.children if self.children is not None else ()


Node: TypeAlias = str | TextRun | Element | Mention | None
Document: TypeAlias = tuple[Node, ...]


def node_text(node: Node) -> str | None:
    """Return the text carried directly by a node, or None.

    Bare strings, TextRuns and leaf Elements carry text; containers and
    mentions do not.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, TextRun):
        return node.text
    if isinstance(node, Element):
        return node.text
    return None


def is_kind(node: Node, kind: ElementKind) -> bool:
    """True if *node* is an Element of the given kind."""
    return isinstance(node, Element) and node.kind == kind


# ---------------------------------------------------------------------------
# Presentation (output)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Fragment:
    """A styled piece of rendered inline content.

    Invariants (enforced in __post_init__):
        - a fragment carries text or children, never both
        - only mention fragments carry a background color
    """
    role: InlineRole = "span"
    text: str = ""
    bold: bool = False
    underline: bool = False
    background_color: str | None = None
    children: tuple[Fragment, ...] = ()

    def __post_init__(self) -> None:
        if self.text and self.children:
            raise ValueError("Fragment cannot carry both text and children")
        if self.background_color is not None and self.role != "mention":
            raise ValueError(
                f"background_color is only valid on mention fragments, "
                f"got role={self.role!r}"
            )

    @property
    def plain_text(self) -> str:
        if self.children:
            return "".join(child.plain_text for child in self.children)
        return self.text


@dataclass(frozen=True, slots=True)
class RenderedUnit:
    """One presentation instruction emitted by the renderers.

    ``content`` holds the inline fragments of the line; ``items`` is only
    used by list units (one fragment sequence per bullet).
    """
    role: DisplayRole
    content: tuple[Fragment, ...] = ()
    label: str | None = None
    items: tuple[tuple[Fragment, ...], ...] = ()

    def __post_init__(self) -> None:
        if self.items and self.role != "list":
            raise ValueError(f"items are only valid on list units, got role={self.role!r}")
        if self.role == "list" and self.content:
            raise ValueError("list units carry items, not content")

    @property
    def plain_text(self) -> str:
        return "".join(f.plain_text for f in self.content)


def plain_text_of(fragments: tuple[Fragment, ...]) -> str:
    """Concatenate the plain text of a fragment sequence."""
    return "".join(f.plain_text for f in fragments)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def fragment_to_dict(fragment: Fragment) -> dict[str, object]:
    """Serialize a fragment; style keys appear only when set."""
    out: dict[str, object] = {"role": fragment.role}
    if fragment.children:
        out["children"] = [fragment_to_dict(c) for c in fragment.children]
    else:
        out["text"] = fragment.text
    if fragment.bold:
        out["bold"] = True
    if fragment.underline:
        out["underline"] = True
    if fragment.background_color is not None:
        out["backgroundColor"] = fragment.background_color
    return out


def unit_to_dict(unit: RenderedUnit) -> dict[str, object]:
    """Serialize a rendered unit to its JSON-safe wire shape."""
    out: dict[str, object] = {"role": unit.role}
    if unit.label is not None:
        out["label"] = unit.label
    out["content"] = [fragment_to_dict(f) for f in unit.content]
    if unit.role == "list":
        out["items"] = [[fragment_to_dict(f) for f in item] for item in unit.items]
    return out
