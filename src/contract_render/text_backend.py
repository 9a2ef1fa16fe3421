"""Reference presentation backends for rendered units.

Two linear text layouts:
- ``render_plain_text``: one line per unit (one per bullet for lists),
  no styling.
- ``render_markdown``: Markdown with bold, underline and mention
  styling. Units are separated by blank lines.

Markdown output escapes document text so that it always reads back as
the same literal characters: inline metacharacters are backslash-escaped,
line-start list markers are neutralized and embedded newlines become
hard breaks. Mention text goes into a code span with a fence longer than
any backtick run it contains.
"""
from __future__ import annotations

import re
from collections.abc import Iterable

from contract_render.document_types import Fragment, RenderedUnit, plain_text_of

_LABELED_INDENT = "    "
_HARD_BREAK = "\\\n"

_INLINE_SPECIAL_RE = re.compile(r"[\\`*_\[\]<>#|~&]")
_ORDERED_MARKER_RE = re.compile(r"^(\s*\d+)([.)])")
_BULLET_MARKER_RE = re.compile(r"^(\s*)([-+=])")
_BACKTICK_RUN_RE = re.compile(r"`+")
_NEWLINE_RE = re.compile(r"\s*[\r\n]\s*")
_LINE_END_RE = re.compile(r"\r\n?|\n")


def _joined(label: str | None, text: str) -> str:
    return f"{label} {text}" if label else text


def render_plain_text(units: Iterable[RenderedUnit]) -> str:
    lines: list[str] = []
    for unit in units:
        match unit.role:
            case "list":
                lines.extend(f"- {plain_text_of(item)}" for item in unit.items)
            case "labeled-line":
                lines.append(_LABELED_INDENT + _joined(unit.label, unit.plain_text))
            case _:
                lines.append(_joined(unit.label, unit.plain_text))
    return "\n".join(lines) + "\n" if lines else ""


# ── markdown ─────────────────────────────────────────────────────────


def escape_markdown(text: str) -> str:
    """Backslash-escape inline Markdown metacharacters in *text*."""
    return _INLINE_SPECIAL_RE.sub(r"\\\g<0>", text)


def _escape_line_start(line: str) -> str:
    line = _ORDERED_MARKER_RE.sub(r"\1\\\2", line, count=1)
    return _BULLET_MARKER_RE.sub(r"\1\\\2", line, count=1)


def _code_span(text: str) -> str:
    text = _LINE_END_RE.sub(" ", text)
    if not text:
        return ""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(text)), default=0)
    fence = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def _wrap(text: str, opener: str, closer: str) -> str:
    # Delimiters must hug non-space text or they are not parsed as emphasis.
    core = text.strip()
    if not core:
        return text
    lead = text[: len(text) - len(text.lstrip())]
    trail = text[len(text.rstrip()):]
    return f"{lead}{opener}{core}{closer}{trail}"


def markdown_fragments(fragments: Iterable[Fragment]) -> str:
    """Markdown for an inline fragment sequence.

    Newlines are left raw here; block-level callers turn them into hard
    breaks.
    """
    return "".join(_markdown_fragment(f) for f in fragments)


def _markdown_fragment(fragment: Fragment) -> str:
    if fragment.role == "mention":
        return _code_span(fragment.plain_text)
    if fragment.children:
        text = markdown_fragments(fragment.children)
    else:
        text = escape_markdown(fragment.text)
    if fragment.underline:
        text = _wrap(text, "<u>", "</u>")
    if fragment.bold:
        text = _wrap(text, "**", "**")
    return text


def _markdown_block(fragments: Iterable[Fragment]) -> str:
    text = markdown_fragments(fragments).strip()
    lines = _LINE_END_RE.split(text)
    return _HARD_BREAK.join(_escape_line_start(line) for line in lines)


def _markdown_single_line(fragments: Iterable[Fragment]) -> str:
    return _NEWLINE_RE.sub(" ", markdown_fragments(fragments).strip())


def render_markdown(units: Iterable[RenderedUnit]) -> str:
    blocks: list[str] = []
    for unit in units:
        match unit.role:
            case "title":
                block = f"# {_markdown_single_line(unit.content)}"
            case "heading":
                title = _NEWLINE_RE.sub(" ", _joined(unit.label, unit.plain_text).strip())
                block = f"**{escape_markdown(title)}**" if title else ""
            case "list":
                block = "\n".join(f"- {_markdown_block(item)}" for item in unit.items)
            case "labeled-line":
                # No indent: four leading spaces would open a code block.
                block = _joined(unit.label, _markdown_block(unit.content))
            case _:
                block = _markdown_block(unit.content)
        if block:
            blocks.append(block)
    return "\n\n".join(blocks) + "\n" if blocks else ""
