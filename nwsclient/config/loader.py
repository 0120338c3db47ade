"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from nwsclient.config.defaults import DEFAULT_LOCATIONS
from nwsclient.config.schema import ClientConfig


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate config from a YAML file.

    A missing path yields the defaults. If no locations are specified,
    DEFAULT_LOCATIONS are injected.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("locations"):
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return ClientConfig(**raw)


def get_config_value(config: ClientConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.alerts_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
