"""Type descriptor models consumed by the definition emitter."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple


class DescriptorError(ValueError):
    """Raised when descriptor data cannot be turned into models."""


class TypeKind(enum.Enum):
    """Rendering variant of a property type."""

    KNOWN = "known"
    DICTIONARY = "dictionary"
    SHAPE = "shape"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TypeInfo:
    """Value type of an interface member."""

    is_known_type: bool = False
    type_name: Optional[str] = None
    is_array: bool = False
    is_dictionary: bool = False
    client_side_reference_name: Optional[str] = None
    shape: Optional[Tuple["PropertyDescriptor", ...]] = None

    @property
    def kind(self) -> TypeKind:
        if self.is_dictionary and self.type_name:
            return TypeKind.DICTIONARY
        if self.is_known_type and self.type_name:
            return TypeKind.KNOWN
        if self.shape is not None:
            return TypeKind.SHAPE
        return TypeKind.UNKNOWN


@dataclass(frozen=True)
class PropertyDescriptor:
    """One member of a class, interface or enum."""

    name: str
    name_with_option: Optional[str] = None
    summary: Optional[str] = None
    init_expression: Optional[str] = None
    type: TypeInfo = field(default_factory=TypeInfo)

    @property
    def declared_name(self) -> str:
        return self.name_with_option or self.name


@dataclass(frozen=True)
class TypeDescriptor:
    """One emittable class, interface or enum."""

    name: str
    namespace: str = ""
    is_enum: bool = False
    base_name: Optional[str] = None
    base_namespace: Optional[str] = None
    summary: Optional[str] = None
    properties: Tuple[PropertyDescriptor, ...] = ()
    references: Tuple[str, ...] = ()


def load_descriptors(path: Path) -> Tuple[List[TypeDescriptor], Optional[str]]:
    """Read descriptors from a JSON document.

    The document is either a list of type objects or a mapping with a
    ``types`` list and an optional ``sourcePath``. Returns the descriptors and
    the source path recorded in the document, if any.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DescriptorError(f"Cannot read descriptors from {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"Invalid JSON in {path}: {exc}") from exc

    source_path: Optional[str] = None
    if isinstance(data, Mapping):
        source_path = _get_str(data, "sourcePath", "source_path")
        data = data.get("types")
    if not isinstance(data, list):
        raise DescriptorError(f"{path.name} must contain a list of types")
    return descriptors_from_data(data), source_path


def descriptors_from_data(items: Sequence[Any]) -> List[TypeDescriptor]:
    """Build descriptors from JSON-shaped mappings (camelCase or snake_case keys)."""
    return [_type_from_data(item, index) for index, item in enumerate(items)]


def _type_from_data(item: Any, index: int) -> TypeDescriptor:
    if not isinstance(item, Mapping):
        raise DescriptorError(f"Type #{index} must be an object")
    name = _get_str(item, "name")
    if not name:
        raise DescriptorError(f"Type #{index} is missing a name")
    properties = item.get("properties") or []
    if not isinstance(properties, list):
        raise DescriptorError(f"Type '{name}' has non-list properties")
    references = item.get("references") or []
    if not isinstance(references, list):
        raise DescriptorError(f"Type '{name}' has non-list references")
    return TypeDescriptor(
        name=name,
        namespace=_get_str(item, "namespace") or "",
        is_enum=_get_bool(item, "isEnum", "is_enum"),
        base_name=_get_str(item, "baseName", "base_name"),
        base_namespace=_get_str(item, "baseNamespace", "base_namespace"),
        summary=_get_str(item, "summary"),
        properties=tuple(_property_from_data(prop, name) for prop in properties),
        references=tuple(dict.fromkeys(str(ref) for ref in references)),
    )


def _property_from_data(item: Any, owner: str) -> PropertyDescriptor:
    if not isinstance(item, Mapping):
        raise DescriptorError(f"Property of '{owner}' must be an object")
    name = _get_str(item, "name")
    if not name:
        raise DescriptorError(f"Property of '{owner}' is missing a name")
    type_data = item.get("type")
    return PropertyDescriptor(
        name=name,
        name_with_option=_get_str(item, "nameWithOption", "name_with_option"),
        summary=_get_str(item, "summary"),
        init_expression=_get_str(item, "initExpression", "init_expression"),
        type=_type_info_from_data(type_data, f"{owner}.{name}") if type_data is not None else TypeInfo(),
    )


def _type_info_from_data(item: Any, owner: str) -> TypeInfo:
    if not isinstance(item, Mapping):
        raise DescriptorError(f"Type of '{owner}' must be an object")
    shape_data = item.get("shape")
    shape = None
    if shape_data is not None:
        if not isinstance(shape_data, list):
            raise DescriptorError(f"Shape of '{owner}' must be a list")
        shape = tuple(_property_from_data(prop, owner) for prop in shape_data)
    return TypeInfo(
        is_known_type=_get_bool(item, "isKnownType", "is_known_type"),
        type_name=_get_str(item, "typeName", "type_name", "typeScriptName"),
        is_array=_get_bool(item, "isArray", "is_array"),
        is_dictionary=_get_bool(item, "isDictionary", "is_dictionary"),
        client_side_reference_name=_get_str(
            item, "clientSideReferenceName", "client_side_reference_name"
        ),
        shape=shape,
    )


def _get_str(data: Mapping[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return str(value)
    return None


def _get_bool(data: Mapping[str, Any], *keys: str) -> bool:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "yes", "1"}:
                return True
            if lowered in {"false", "no", "0"}:
                return False
        raise DescriptorError(f"Invalid boolean for {key}: {value!r}")
    return False


__all__ = [
    "DescriptorError",
    "PropertyDescriptor",
    "TypeDescriptor",
    "TypeInfo",
    "TypeKind",
    "descriptors_from_data",
    "load_descriptors",
]
