"""Configuration loader for the nodeselect command line.

Reads YAML configuration, applies environment variable overrides, and returns typed
dataclasses consumed by the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _expand_env(value: Any) -> Any:
    """Expand ``$VAR`` references in every string of a loaded YAML tree."""
    if isinstance(value, dict):
        return {section: _expand_env(item) for section, item in value.items()}
    if isinstance(value, list):
        return list(map(_expand_env, value))
    return os.path.expandvars(value) if isinstance(value, str) else value


def _merge_dicts(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``updates`` over ``base`` one settings section at a time."""
    merged = {**base}
    for section, override in updates.items():
        current = merged.get(section)
        nested = isinstance(current, dict) and isinstance(override, dict)
        merged[section] = _merge_dicts(current, override) if nested else override
    return merged


def _apply_env_overrides(config: Dict[str, Any], prefix: str = "NODESELECT") -> Dict[str, Any]:
    """Override config using env vars like NODESELECT_OUTPUT__FORMAT=json."""
    overrides: Dict[str, Any] = {}
    for env_key, env_val in os.environ.items():
        if not env_key.startswith(prefix + "_"):
            continue
        trimmed = env_key[len(prefix) + 1 :]
        keys = trimmed.lower().split("__")
        if len(keys) < 2:
            continue
        cursor = overrides
        for key in keys[:-1]:
            cursor = cursor.setdefault(key, {})
        cursor[keys[-1]] = _coerce_env_value(env_val)
    return _merge_dicts(config, overrides)


def _coerce_env_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in {"true", "yes"}:
        return True
    if lowered in {"false", "no"}:
        return False
    try:
        return int(value)
    except ValueError:
        return value


@dataclass
class SelectorSettings:
    flavor: str = "html"  # html | xml


@dataclass
class OutputSettings:
    format: str = "text"  # text | html | json
    strip: bool = True
    separator: str = "\n"


@dataclass
class LoggingSettings:
    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s %(message)s"


@dataclass
class Config:
    selector: SelectorSettings = field(default_factory=SelectorSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def load_config(path: Optional[Path | str] = None, env_prefix: str = "NODESELECT") -> Config:
    """Load YAML config and merge env overrides."""
    config_path = Path(path) if path else Path("nodeselect.yaml")
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            data = _expand_env(yaml.safe_load(f) or {})
    else:
        data = {}
    merged_dict = _apply_env_overrides(data, prefix=env_prefix)
    return map_dict_to_config(merged_dict)


def map_dict_to_config(data: Dict[str, Any]) -> Config:
    return Config(
        selector=SelectorSettings(**data.get("selector", {})),
        output=OutputSettings(**data.get("output", {})),
        logging=LoggingSettings(**data.get("logging", {})),
    )


__all__ = [
    "Config",
    "SelectorSettings",
    "OutputSettings",
    "LoggingSettings",
    "load_config",
    "map_dict_to_config",
]
