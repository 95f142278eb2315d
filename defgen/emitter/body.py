"""Declaration rendering for namespace groups of type descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import EmitterConfig
from ..models import PropertyDescriptor, TypeDescriptor, TypeInfo, TypeKind
from ..naming import (
    clean_enum_init_value,
    enum_value_name,
    ignores_base_type,
    property_name,
    split_lines,
    type_name,
)
from .placeholders import ExtendsRegistry, escape_placeholders, placeholder_token

# Canonical form before normalisation: CRLF line endings and tab indentation.
EOL = "\r\n"
INDENT = "\t"


@dataclass
class RenderedBody:
    """Body text with embedded placeholders plus what the import pass needs."""

    text: str
    declared: List[str] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)
    needed: List[str] = field(default_factory=list)
    base_names: List[str] = field(default_factory=list)


def group_by_namespace(descriptors: Iterable[TypeDescriptor]) -> Dict[str, List[TypeDescriptor]]:
    """Group descriptors by namespace in first-seen order."""
    groups: Dict[str, List[TypeDescriptor]] = {}
    for descriptor in descriptors:
        groups.setdefault(descriptor.namespace, []).append(descriptor)
    return groups


def write_comment(summary: Optional[str], prefix: str, out: List[str]) -> None:
    """Append a block doc comment for ``summary``; nothing for empty text."""
    if not summary:
        return
    out.append(f"{prefix}/** {EOL}")
    for line in split_lines(summary):
        out.append(f"{prefix} * {escape_placeholders(line.replace('*/', '+/'))}{EOL}")
    out.append(f"{prefix} */{EOL}")


class BodyRenderer:
    """Renders one declaration block per descriptor."""

    def __init__(self, config: EmitterConfig) -> None:
        self.config = config

    def render(self, descriptors: Sequence[TypeDescriptor], registry: ExtendsRegistry) -> RenderedBody:
        config = self.config
        out: List[str] = []
        result = RenderedBody(text="")
        export = "" if config.declare_module else "export "
        module_prefix = INDENT if config.declare_module else ""

        for namespace, group in group_by_namespace(descriptors).items():
            if config.declare_module:
                out.append(f"declare module {namespace or config.default_module_name} {{{EOL}")

            for descriptor in group:
                name = type_name(descriptor.name, config)
                result.declared.append(name)
                if not config.declare_module:
                    result.exports.append(name)

                write_comment(descriptor.summary, module_prefix, out)
                if descriptor.is_enum:
                    keyword = "const enum " if config.const_enums else "enum "
                    out.append(f"{module_prefix}{export}{keyword}{name} {{{EOL}")
                    self._write_enum_members(descriptor.properties, module_prefix + INDENT, out)
                else:
                    keyword = "class " if config.class_instead_of_interface else "interface "
                    extends = self._extends_placeholder(descriptor, registry, result)
                    out.append(f"{module_prefix}{export}{keyword}{name} {extends}{{{EOL}")
                    self._write_members(descriptor.properties, module_prefix + INDENT, out)
                    _collect_references(descriptor.properties, result.needed)
                out.append(f"{module_prefix}}}{EOL}")

            if config.declare_module:
                out.append(f"}}{EOL}")

        result.text = "".join(out)
        return result

    def _extends_placeholder(
        self, descriptor: TypeDescriptor, registry: ExtendsRegistry, result: RenderedBody
    ) -> str:
        base = descriptor.base_name
        if not base or ignores_base_type(descriptor.summary, self.config):
            return ""
        base_ref = type_name(base, self.config)
        if descriptor.base_namespace and descriptor.base_namespace != descriptor.namespace:
            base_ref = f"{descriptor.base_namespace}.{base_ref}"
        registry.register(base, f"extends {base_ref} ")
        if base not in result.base_names:
            result.base_names.append(base)
        return placeholder_token(base)

    def _write_enum_members(self, members: Sequence[PropertyDescriptor], prefix: str, out: List[str]) -> None:
        for member in members:
            write_comment(member.summary, prefix, out)
            name = enum_value_name(member.name, self.config)
            if member.init_expression is not None:
                out.append(f"{prefix}{name} = {clean_enum_init_value(member.init_expression)},{EOL}")
            else:
                out.append(f"{prefix}{name},{EOL}")

    def _write_members(self, members: Sequence[PropertyDescriptor], prefix: str, out: List[str]) -> None:
        for member in members:
            write_comment(member.summary, prefix, out)
            out.append(f"{prefix}{property_name(member.declared_name, self.config)}: ")
            self._write_type(member.type, prefix, out)
            out.append(f";{EOL}")

    def _write_type(self, info: TypeInfo, prefix: str, out: List[str]) -> None:
        kind = info.kind
        if kind is TypeKind.KNOWN or kind is TypeKind.DICTIONARY:
            out.append(info.type_name or "any")
        elif kind is TypeKind.SHAPE:
            out.append(f"{{{EOL}")
            self._write_members(info.shape or (), prefix + INDENT, out)
            out.append(f"{prefix}}}")
        else:
            out.append("any")
        if info.is_array:
            out.append("[]")


def _collect_references(members: Sequence[PropertyDescriptor], needed: List[str]) -> None:
    # dictionaries are built into the target language and never need an import
    for member in members:
        info = member.type
        if info.client_side_reference_name and not info.is_dictionary:
            if info.client_side_reference_name not in needed:
                needed.append(info.client_side_reference_name)
        if info.shape:
            _collect_references(info.shape, needed)


__all__ = ["BodyRenderer", "EOL", "INDENT", "RenderedBody", "group_by_namespace", "write_comment"]
