import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "noble_lineage.yml"
CONFIG_ENV_VAR = "NOBLE_LINEAGE_CONFIG"

DEFAULT_LINEAGE = {
    "root_external_id": "0",
    "living_sentinel": 9999,
    "age_at_death_tolerance": 1,
}


class LineageConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.lineage = {**DEFAULT_LINEAGE, **(data.get("lineage", {}) or {})}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def root_external_id(self) -> str:
        return str(self.lineage["root_external_id"])

    @property
    def living_sentinel(self) -> int:
        return int(self.lineage["living_sentinel"])

    @property
    def age_at_death_tolerance(self) -> int:
        return int(self.lineage["age_at_death_tolerance"])


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_PATH


def load_config() -> 'LineageConfig':
    path = _config_path()
    if not path.exists():
        if path != CONFIG_PATH:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the project tree: run on built-in defaults.
        return LineageConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return LineageConfig(data)

_config_cache = None

def get_config() -> 'LineageConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` re-reads the file."""
    global _config_cache
    _config_cache = None
