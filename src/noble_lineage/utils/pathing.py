# src/noble_lineage/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <project_root>/src/noble_lineage/utils/pathing.py -> parents[3]
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

PathPart = Union[str, Path]


def project_root() -> Path:
    """
    Directory holding ``src/``, ``config/``, ``tests/`` and the default
    ``data/`` and ``logs/`` directories.
    """
    return _PROJECT_ROOT


def from_project_root(*parts: PathPart) -> Path:
    """``from_project_root("config", "noble_lineage.yml")``"""
    return project_root().joinpath(*parts)


def data_path(*parts: PathPart) -> Path:
    """
    Path under the configured data directory (``paths.data_dir``, relative
    paths taken from the project root). The CLI looks for its default
    snapshot here.
    """
    from noble_lineage.config import get_config

    data_dir = Path(get_config().paths.get("data_dir") or "data")
    if not data_dir.is_absolute():
        data_dir = project_root() / data_dir
    return data_dir.joinpath(*parts)


def tests_data_path(*parts: PathPart) -> Path:
    """Fixture file under ``tests/data/``, e.g. ``tests_data_path("snapshot.json")``."""
    return from_project_root("tests", "data", *parts)
