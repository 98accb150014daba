# src/noble_lineage/utils/__init__.py

from .pathing import (
    data_path,
    from_project_root,
    project_root,
    tests_data_path,
)

__all__ = [
    "data_path",
    "from_project_root",
    "project_root",
    "tests_data_path",
]
