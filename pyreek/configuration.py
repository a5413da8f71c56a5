"""Configuration loading for pyreek (.reek.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigurationError

CONFIG_FILENAME = ".reek.yml"


@dataclass
class ReekConfig:
    """Settings read from a .reek.yml file."""

    root: Path
    detectors: Dict[str, Dict[str, Any]] = field(default_factory=dict)


def load_configuration(config_path: Path) -> ReekConfig:
    """Load configuration from disk; a missing file yields the defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReekConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{config_file.name} must contain a mapping at the root"
        )

    detectors: Dict[str, Dict[str, Any]] = {}
    for name, options in _as_dict(data.get("detectors")).items():
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise ConfigurationError(
                f"Options for smell detector '{name}' in {config_file.name} "
                "must be a mapping"
            )
        detectors[str(name)] = {str(key): value for key, value in options.items()}

    return ReekConfig(root=root, detectors=detectors)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError("'detectors' must map detector names to options")
    return value


__all__ = ["CONFIG_FILENAME", "ReekConfig", "load_configuration"]
