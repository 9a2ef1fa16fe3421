"""I/O utilities for JSON document and report files.

orjson-backed reading of document exports and render configs, and
serialization of rendered output.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file. Decode errors propagate as orjson.JSONDecodeError."""
    return orjson.loads(path.read_bytes())


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize to JSON bytes (key order preserved, trailing newline)."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(obj, option=opts | orjson.OPT_APPEND_NEWLINE)
