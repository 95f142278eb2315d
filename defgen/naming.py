"""Identifier casing, enum literal cleaning and generated-file naming."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Optional

from .config import EmitterConfig

GENERATED_SUFFIX = ".generated"
IGNORE_BASE_TYPE_FLAG = "IgnoreBaseType"

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def camel_case(name: str) -> str:
    if not name or not name.strip():
        return name
    return name[0].lower() + name[1:]


def type_name(name: str, config: EmitterConfig) -> str:
    """Canonical spelling of a declared or referenced type name."""
    return camel_case(name) if config.camel_case_type_names else name


def property_name(name: str, config: EmitterConfig) -> str:
    return camel_case(name) if config.camel_case_property_names else name


def enum_value_name(name: str, config: EmitterConfig) -> str:
    return camel_case(name) if config.camel_case_enum_values else name


def clean_enum_init_value(value: str) -> str:
    """Normalise a numeric enum initializer for the target language.

    >>> clean_enum_init_value("123UL")
    '123'
    >>> clean_enum_init_value("0xFFu")
    '0xFF'
    >>> clean_enum_init_value("000")
    '0'
    """
    value = value.rstrip("uUlL")
    if value[:2].lower() == "0x":
        return value
    # leading zeros would make the literal octal
    trimmed = value.lstrip("0")
    return trimmed or "0"


def split_lines(text: str) -> list[str]:
    """Split on CRLF, CR or LF, keeping empty lines."""
    return _NEWLINE_PATTERN.split(text)


def ignores_base_type(summary: Optional[str], config: EmitterConfig) -> bool:
    """True when the summary carries an options line asking to drop the base type."""
    if not summary:
        return False
    for line in split_lines(summary):
        if line.startswith(config.options_marker) and IGNORE_BASE_TYPE_FLAG in line:
            return True
    return False


def default_extension(config: EmitterConfig) -> str:
    return f"{GENERATED_SUFFIX}.d.ts" if config.declare_module else f"{GENERATED_SUFFIX}.ts"


def remove_default_extension(file_name: str) -> str:
    """Strip the generated extension (or the last suffix) from a file name."""
    for suffix in (f"{GENERATED_SUFFIX}.d.ts", f"{GENERATED_SUFFIX}.ts"):
        if file_name.endswith(suffix):
            return file_name[: -len(suffix)]
    return PurePath(file_name).stem


def output_path_for(source_path: str, config: EmitterConfig) -> PurePath:
    """Conventional location of the definition file generated for a source file."""
    source = PurePath(source_path)
    return source.with_name(source.stem + default_extension(config))


def amd_module_name(source_path: str) -> str:
    return PurePath(source_path).stem + GENERATED_SUFFIX


__all__ = [
    "GENERATED_SUFFIX",
    "IGNORE_BASE_TYPE_FLAG",
    "amd_module_name",
    "camel_case",
    "clean_enum_init_value",
    "default_extension",
    "enum_value_name",
    "ignores_base_type",
    "output_path_for",
    "property_name",
    "remove_default_extension",
    "split_lines",
    "type_name",
]
