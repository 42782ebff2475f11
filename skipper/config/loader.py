"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from skipper.config.defaults import DEFAULT_ROUTES
from skipper.config.schema import SkipperConfig


def load_config(path: str | Path | None = None) -> SkipperConfig:
    """Load and validate config from a YAML file.

    A missing path yields the built-in defaults. If no routes are
    specified, injects DEFAULT_ROUTES.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    if "routes" not in raw or not raw["routes"]:
        raw["routes"] = [r.model_dump() for r in DEFAULT_ROUTES]

    return SkipperConfig(**raw)


def get_config_value(config: SkipperConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'weather.timeout_seconds'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: SkipperConfig, dotted_key: str, value: Any) -> SkipperConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SkipperConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return SkipperConfig(**data)
