"""Configuration helpers for the web graph engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    @property
    def max_pages(self) -> Optional[int]:
        value = self.raw.get("max_pages", DEFAULTS["max_pages"])
        return None if value is None else int(value)

    @property
    def pages_file(self) -> str:
        return str(self.raw.get("pages_file", DEFAULTS["pages_file"]))

    @property
    def links_file(self) -> str:
        return str(self.raw.get("links_file", DEFAULTS["links_file"]))


DEFAULTS: Dict[str, Any] = {
    "max_pages": 40,
    "pages_file": "pages.txt",
    "links_file": "links.txt",
}


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = DEFAULTS.copy()

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        merge_into(data, user)

    return EngineConfig(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value
