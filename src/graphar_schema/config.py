from __future__ import annotations

import os
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "GRAPHAR_SCHEMA_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "graphar_schema.yml"


class GSConfig:
    def __init__(self, data):
        self.logging = data.get("logging", {}) or {}
        self.schema = data.get("schema", {}) or {}
        self.debug = bool(data.get("debug", False))
        self.source = data.get("_source")

    @property
    def default_version(self) -> str:
        """Version tag applied to documents that omit ``version``."""
        return str(self.schema.get("version", "gar/v1"))

    @property
    def default_file_type(self) -> str:
        """File type applied to groups and adjacency lists that omit ``file_type``."""
        return str(self.schema.get("file_type", "parquet"))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> GSConfig:
    path = config_path()
    if not path.exists():
        if os.environ.get(CONFIG_ENV_VAR):
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the project tree: run on defaults.
        return GSConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data["_source"] = str(path)
    return GSConfig(data)


_config_cache = None


def get_config() -> GSConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
