"""
Exporter package.

Re-exports the JSON helpers used by the CLI.
"""

from __future__ import annotations

from .json_exporter import serialize_json, to_json_compatible, write_json

__all__ = ["serialize_json", "to_json_compatible", "write_json"]
