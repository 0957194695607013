"""Configuration loading for examplecat (.examplecat.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .renderer import DEFAULT_TEMPLATE

CONFIG_FILENAME = ".examplecat.yml"
DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_TEMPLATES_DIR = "docs-template"
DEFAULT_OUTPUT = "examples/README.md"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CatalogConfig:
    """Locations of the manifest, templates and generated catalog."""

    root: Path
    manifest_path: Path
    templates_dir: Path
    template_name: str
    output_path: Path

    @classmethod
    def defaults(cls, root: Path) -> "CatalogConfig":
        return cls(
            root=root,
            manifest_path=root / DEFAULT_MANIFEST,
            templates_dir=root / DEFAULT_TEMPLATES_DIR,
            template_name=DEFAULT_TEMPLATE,
            output_path=root / DEFAULT_OUTPUT,
        )


def load_config(config_path: Path, *, root: Path | None = None) -> CatalogConfig:
    """Load configuration from disk, falling back to defaults when absent.

    Paths in the file resolve against ``root`` when given, otherwise against
    the directory holding the configuration file.
    """
    config_file = _resolve_config_path(config_path)
    if root is not None:
        root = root.expanduser()
        if not root.is_dir():
            raise ConfigError(f"Project root {root} is not a directory")
        root = root.resolve()
    else:
        root = config_file.parent.resolve()
    config = CatalogConfig.defaults(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    manifest = _as_str(data.get("manifest"))
    if manifest:
        config.manifest_path = root / manifest
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir
    template = _as_str(data.get("template"))
    if template:
        config.template_name = template
    output = _as_str(data.get("output"))
    if output:
        config.output_path = root / output
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["CONFIG_FILENAME", "CatalogConfig", "ConfigError", "load_config"]
