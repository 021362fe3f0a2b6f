import os
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "GEDCOM_KINSHIP_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_kinship.yml"


class GPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.parser = data.get("parser", {})
        self.diagram = data.get("diagram", {})
        self.debug = data.get("debug", False)


def load_config(path=None) -> 'GPConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        # Installed without the repository's config/ directory
        return GPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)


_config_cache = None


def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
