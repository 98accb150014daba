import json
import shutil
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from noble_lineage.registry import build_monarchs, build_people  # noqa: E402
from noble_lineage.utils import tests_data_path  # noqa: E402


@pytest.fixture
def snapshot_document():
    with tests_data_path("snapshot.json").open("r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def people(snapshot_document):
    return build_people(snapshot_document["people"])


@pytest.fixture
def monarchs(snapshot_document):
    return build_monarchs(snapshot_document["monarchs"])


@pytest.fixture
def snapshot_path(tmp_path):
    """A writable copy of the fixture snapshot."""
    target = tmp_path / "snapshot.json"
    shutil.copyfile(tests_data_path("snapshot.json"), target)
    return target
