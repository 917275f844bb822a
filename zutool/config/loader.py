"""YAML config loader with runtime get/set and write-back."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from zutool.config.schema import ZutoolConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> ZutoolConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document yields the defaults.
    """
    if path is None:
        return ZutoolConfig()
    path = Path(path)
    if not path.exists():
        logger.debug("Config %s not found, using defaults", path)
        return ZutoolConfig()
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return ZutoolConfig(**raw)


def save_config(config: ZutoolConfig, path: str | Path) -> None:
    """Write the config back as YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.loads(config.model_dump_json())
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)


def get_config_value(config: ZutoolConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout_seconds'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: ZutoolConfig, dotted_key: str, value: Any) -> ZutoolConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new ZutoolConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return ZutoolConfig(**data)
