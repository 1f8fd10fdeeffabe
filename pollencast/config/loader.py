"""YAML config loader with hashing and dotted-key lookup."""

import hashlib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from pollencast.config.defaults import DEFAULT_SEVERITY_BANDS
from pollencast.config.schema import AppConfig


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    If no severity bands are specified in the YAML, injects DEFAULT_SEVERITY_BANDS.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    severity = raw.setdefault("severity", {}) or {}
    if not severity.get("bands"):
        severity["bands"] = [b.model_dump() for b in DEFAULT_SEVERITY_BANDS]
    raw["severity"] = severity

    return AppConfig(**raw)


def default_config() -> AppConfig:
    """Config with every default applied, for running without a YAML file."""
    return AppConfig(severity={"bands": DEFAULT_SEVERITY_BANDS})


def config_hash(config: AppConfig) -> str:
    """Short SHA256 fingerprint of the effective config, shown by `config show`."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Look up a value by dotted path, e.g. 'cache.pollen_ttl_seconds'.

    List items are addressed by index ('severity.bands.3.min_count').
    Raises KeyError for any path that does not resolve.
    """
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, (list, tuple)):
            try:
                obj = obj[int(part)]
            except (ValueError, IndexError):
                raise KeyError(f"Config key not found: {dotted_key}") from None
        elif isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
