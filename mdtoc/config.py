"""Configuration loading for mdtoc (.mdtoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .postproc.toc import BulletStyle

CONFIG_FILENAME = ".mdtoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MdTocConfig:
    """Represents the settings defined in .mdtoc.yml."""

    format: BulletStyle = BulletStyle.ALTERNATING
    bullet: Optional[str] = None
    begin_marker: Optional[str] = None
    end_marker: Optional[str] = None
    include_title: bool = False


def load_config(config_path: Path) -> MdTocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return MdTocConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = MdTocConfig()
    format_name = _as_str(data.get("format"))
    if format_name:
        config.format = _as_style(format_name)
    config.bullet = _as_str(data.get("bullet")) or None
    config.begin_marker = _as_str(data.get("begin_marker")) or None
    config.end_marker = _as_str(data.get("end_marker")) or None
    include_title = _as_bool(data.get("include_title"))
    if include_title is not None:
        config.include_title = include_title
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


def _as_style(value: str) -> BulletStyle:
    try:
        return BulletStyle(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(style.value for style in BulletStyle)
        raise ConfigError(f"Unknown format {value!r}; expected one of: {choices}") from exc


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "MdTocConfig", "load_config"]
