#!/usr/bin/env python3
"""Render a contract document export to rendered units, text or Markdown.

Usage:
    # Rendered units as JSON on stdout
    python3 scripts/render_document.py --input data.json

    # Plain-text layout written to a file
    python3 scripts/render_document.py --input data.json --format text \
      --out rendered.txt

    # Custom clause numbering
    python3 scripts/render_document.py --input data.json \
      --config render_config.json --format markdown
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from contract_render.document_renderer import render_document, render_to_dicts
from contract_render.document_types import RenderedUnit
from contract_render.io_utils import dumps_json
from contract_render.render_config import DEFAULT_CONFIG, RenderConfig
from contract_render.text_backend import render_markdown, render_plain_text
from contract_render.tree_loader import load_document

log = logging.getLogger("render_document")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a contract document export."
    )
    parser.add_argument(
        "--input", required=True, type=Path, help="Path to the document JSON export"
    )
    parser.add_argument(
        "--format",
        choices=("json", "text", "markdown"),
        default="json",
        help="Output layout (default: json rendered units).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="render_config.json overriding clause titles and ordinals.",
    )
    parser.add_argument(
        "--out", type=Path, default=None, help="Output file (default: stdout)."
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser


def format_output(units: list[RenderedUnit], fmt: str) -> bytes:
    if fmt == "text":
        return render_plain_text(units).encode("utf-8")
    if fmt == "markdown":
        return render_markdown(units).encode("utf-8")
    return dumps_json(render_to_dicts(units))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if not args.input.exists():
        print(f"Error: input not found: {args.input}", file=sys.stderr)
        return 1
    if args.config is not None and not args.config.exists():
        print(f"Error: config not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = RenderConfig.from_json(args.config) if args.config else DEFAULT_CONFIG
        document = load_document(args.input)
    except (OSError, ValueError) as exc:  # orjson.JSONDecodeError is a ValueError
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    units = render_document(document, config=config)
    log.info("Rendered %d blocks into %d units", len(document), len(units))

    payload = format_output(units, args.format)
    if args.out is None:
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
    else:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_bytes(payload)
        log.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
