"""
json_exporter.py
JSON output for trees, statistics and reports.

- Objects with a ``to_dict()`` (records, tree nodes, reports) use it, so the
  output keeps the camelCase document shape
- Other dataclasses fall back to ``asdict``
- dates become ISO strings
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from pathlib import Path
from typing import Any, Optional

from noble_lineage.logging import get_logger

log = get_logger("json_exporter")


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - ``to_dict()`` is preferred when the object has one
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively, keys stringified)
    - list / tuple / set -> list (recursively)
    - date -> ISO string
    - anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_json_compatible(to_dict())

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_compatible(v) for v in obj]

    if isinstance(obj, date):
        return obj.isoformat()

    return str(obj)


def serialize_json(data: Any, *, pretty: bool = True) -> str:
    payload = to_json_compatible(data)
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def write_json(data: Any, *, out: Optional[Path], pretty: bool = True) -> None:
    """
    Write JSON to ``out`` or, when ``out`` is None, to stdout.
    """
    payload = serialize_json(data, pretty=pretty)

    if out is None:
        print(payload)
        return

    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload, encoding="utf-8")
    log.info("JSON written to %s (%d bytes)", out, out.stat().st_size)
