"""Top-level driver: document blocks to an ordered list of rendered units."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from contract_render.block_renderer import render_block
from contract_render.document_types import Node, RenderedUnit, unit_to_dict
from contract_render.render_config import DEFAULT_CONFIG, RenderConfig
from contract_render.tree_loader import document_from_json


def render_document(
    blocks: Iterable[Node],
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> list[RenderedUnit]:
    """Render every top-level block in order, flattening per-block output."""
    units: list[RenderedUnit] = []
    for block in blocks:
        units.extend(render_block(block, config=config))
    return units


def render_json(value: Any, *, config: RenderConfig = DEFAULT_CONFIG) -> list[RenderedUnit]:
    """Render a raw document export value (see tree_loader)."""
    return render_document(document_from_json(value), config=config)


def render_to_dicts(units: Iterable[RenderedUnit]) -> list[dict[str, object]]:
    return [unit_to_dict(u) for u in units]
