"""Rendering configuration: recognized clause titles and layout hooks.

Keeps the renderers free of hard-coded title lists. Adding a numbered
top-level clause means editing a render_config.json, not the code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from contract_render.io_utils import load_json


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Title vocabularies and fixed ordinals used while rendering."""
    # Top-level clause titles, in numbering order ("1.", "2.", "3.")
    clause_titles: tuple[str, ...] = (
        "Key Details",
        "Definitions",
        "Agreement to Provide Services",
    )
    # Generic block title that triggers the line-split party layout
    parties_title: str = "Parties"
    # Clause titles whose body text is rendered without bold/underline
    plain_body_titles: tuple[str, ...] = ("Definitions",)
    # Ordinal given to every clause grouped inside a paragraph block
    grouped_clause_ordinal: int = 2

    def clause_ordinal(self, title: str | None) -> int | None:
        """Zero-based position of *title* among the numbered clauses."""
        if title is None or title not in self.clause_titles:
            return None
        return self.clause_titles.index(title)

    def is_plain_body(self, title: str | None) -> bool:
        return title is not None and title in self.plain_body_titles

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderConfig:
        """Build a config from a mapping; missing keys keep their defaults."""
        defaults = cls()
        return cls(
            clause_titles=_str_tuple(data, "clause_titles", defaults.clause_titles),
            parties_title=_str_value(data, "parties_title", defaults.parties_title),
            plain_body_titles=_str_tuple(
                data, "plain_body_titles", defaults.plain_body_titles,
            ),
            grouped_clause_ordinal=_int_value(
                data, "grouped_clause_ordinal", defaults.grouped_clause_ordinal,
            ),
        )

    @classmethod
    def from_json(cls, path: Path) -> RenderConfig:
        """Load from a render_config.json file."""
        data = load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"render config must be a JSON object: {path}")
        return cls.from_dict(data)


DEFAULT_CONFIG = RenderConfig()


def _str_tuple(data: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key} must be a list of strings, got {value!r}")
    return tuple(value)


def _str_value(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _int_value(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value
