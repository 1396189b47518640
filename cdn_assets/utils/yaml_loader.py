from pathlib import Path
from typing import Any

from ruamel.yaml import YAML


def get_yaml_instance() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    return yaml


def load_mapping(file_path: str | Path) -> dict[str, Any]:
    with open(file_path, "r") as f:
        data = get_yaml_instance().load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must contain a mapping, got {type(data).__name__}")
    return data
