"""Configuration loading for defgen (.defgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILE_NAME = ".defgen.yml"
DEFAULT_OPTIONS_MARKER = "TypeScriptDefinitionGenerator:"
EOL_STYLES = ("crlf", "lf")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class EmitterConfig:
    """Output style switches threaded through every rendering call."""

    declare_module: bool = True
    class_instead_of_interface: bool = False
    const_enums: bool = True
    indent_tabs: bool = False
    indent_size: int = 4
    eol: str = "crlf"
    strict: bool = False
    default_module_name: str = "server"
    add_amd_module_name: bool = False
    camel_case_type_names: bool = False
    camel_case_property_names: bool = True
    camel_case_enum_values: bool = False
    options_marker: str = DEFAULT_OPTIONS_MARKER

    def __post_init__(self) -> None:
        if self.eol not in EOL_STYLES:
            raise ConfigError(f"eol must be one of {', '.join(EOL_STYLES)}, got {self.eol!r}")
        if self.indent_size < 0:
            raise ConfigError("indent_size must not be negative")

    def with_overrides(self, **overrides: Any) -> "EmitterConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


_BOOL_FIELDS = {
    "declare_module",
    "class_instead_of_interface",
    "const_enums",
    "indent_tabs",
    "strict",
    "add_amd_module_name",
    "camel_case_type_names",
    "camel_case_property_names",
    "camel_case_enum_values",
}
_INT_FIELDS = {"indent_size"}
_STR_FIELDS = {"eol", "default_module_name", "options_marker"}


def load_config(config_path: Path) -> EmitterConfig:
    """Load configuration from disk; a missing file yields the defaults."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return EmitterConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    # The emitter section may live under `emitter:` or at the root.
    section = data.get("emitter", data)
    if not isinstance(section, dict):
        raise ConfigError("`emitter` must be a mapping")
    return config_from_mapping(section)


def config_from_mapping(data: Dict[str, Any]) -> EmitterConfig:
    """Build an EmitterConfig from a plain mapping, rejecting unknown keys."""
    known = {item.name for item in fields(EmitterConfig)}
    values: Dict[str, Any] = {}
    for key, raw in data.items():
        if key not in known:
            raise ConfigError(f"Unknown emitter option: {key}")
        if raw is None:
            continue
        if key in _BOOL_FIELDS:
            parsed = _as_bool(raw)
        elif key in _INT_FIELDS:
            parsed = _as_int(raw)
        else:
            parsed = _as_str(raw)
            if key == "eol" and parsed is not None:
                parsed = parsed.lower()
        if parsed is None:
            raise ConfigError(f"Invalid value for {key}: {raw!r}")
        values[key] = parsed
    return EmitterConfig(**values)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


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


__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "EmitterConfig",
    "config_from_mapping",
    "load_config",
]
