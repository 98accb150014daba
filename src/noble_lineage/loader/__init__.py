from __future__ import annotations

from .json_store import JsonSnapshotStore, PersonStore, resolve_snapshot_path

__all__ = ["JsonSnapshotStore", "PersonStore", "resolve_snapshot_path"]
