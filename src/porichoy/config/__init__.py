"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..schemas.config import load_config

_PACKAGE_DIR = Path(__file__).parent


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path = _PACKAGE_DIR):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        return self.load_path(self._base_path / f"{name}.yaml")

    @staticmethod
    def load_path(path: str | Path) -> dict[str, Any]:
        with Path(path).open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must be a YAML object: {path}")
        return loaded


def load_settings(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge overrides onto the packaged defaults and validate the result."""
    settings = ConfigManager().load("defaults")
    if overrides:
        settings = _merge(settings, overrides)
    return load_config(settings).to_settings()


def _merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


__all__ = ["ConfigManager", "load_settings"]
