"""Cross-file import resolution for export-style definition files."""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set

from ..config import EmitterConfig
from ..errors import MissingBaseClassError, MissingImportError
from ..logging import get_logger
from ..models import TypeDescriptor
from ..naming import GENERATED_SUFFIX, remove_default_extension, type_name
from .body import RenderedBody
from .placeholders import ExtendsRegistry


@dataclass
class ImportBlock:
    """Import statements and warning comments to prepend to the body."""

    lines: List[str] = field(default_factory=list)
    imported: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    unresolved_bases: List[str] = field(default_factory=list)


def to_forward_slashes(path: str) -> str:
    """Rewrite Windows directory separators so paths split the same on every host."""
    return path.replace("\\", "/")


def reference_symbol(reference: str) -> str:
    """Importable symbol derived from a generated file's base name."""
    return remove_default_extension(posixpath.basename(to_forward_slashes(reference)))


def relative_import_path(source_path: str, reference: str) -> str:
    """Module specifier for ``reference`` as seen from the source file's directory."""
    source_dir = posixpath.dirname(to_forward_slashes(source_path)) or "."
    target = posixpath.join(source_dir, to_forward_slashes(reference))
    relative = posixpath.relpath(target, source_dir)
    if not relative.startswith("."):
        relative = "./" + relative
    if relative.endswith(".ts"):
        relative = relative[: -len(".ts")]
    return relative


class ImportResolver:
    """Computes the import block for a rendered body.

    Base classes are looked up as ``<Base><source suffix>`` beside the source
    file. Unresolvable names either become warning comments or, in strict
    mode, raise a :class:`~defgen.errors.DefinitionError`.
    """

    def __init__(
        self,
        config: EmitterConfig,
        *,
        file_exists: Optional[Callable[[Path], bool]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self._file_exists = file_exists or (lambda path: path.is_file())
        self.logger = logger or get_logger("imports")

    def resolve(
        self,
        descriptors: Sequence[TypeDescriptor],
        body: RenderedBody,
        source_path: str,
        registry: ExtendsRegistry,
    ) -> ImportBlock:
        block = ImportBlock()
        if self.config.declare_module:
            return block

        declared: Set[str] = set(body.declared)
        declared.update(descriptor.name for descriptor in descriptors)
        needed = [name for name in body.needed if name not in declared]

        for reference in _distinct_references(descriptors):
            symbol = reference_symbol(reference)
            # skip indirect references
            if symbol not in needed or symbol in block.imported:
                continue
            block.lines.append(
                f'import {{ {symbol} }} from "{relative_import_path(source_path, reference)}";'
            )
            block.imported.append(symbol)

        self._import_base_classes(body, source_path, declared, registry, block)

        missing = [
            name for name in needed if name not in block.imported and name not in body.exports
        ]
        if missing:
            if self.config.strict:
                raise MissingImportError(missing)
            message = (
                f"Sorry, needed imports missing: {', '.join(missing)}. "
                "Make sure file names match contained class/enum name."
            )
            block.lines.append(f"// {message}")
            self.logger.warning(message)
            block.missing = missing
        return block

    def _import_base_classes(
        self,
        body: RenderedBody,
        source_path: str,
        declared: Set[str],
        registry: ExtendsRegistry,
        block: ImportBlock,
    ) -> None:
        source = Path(source_path)
        for base in body.base_names:
            symbol = type_name(base, self.config)
            if base in declared or symbol in declared or symbol in block.imported:
                continue
            expected = source.parent / f"{base}{source.suffix}"
            if not self._file_exists(expected):
                if self.config.strict:
                    raise MissingBaseClassError(base, expected)
                message = (
                    f"Sorry, ignoring base class '{base}' because expected source file "
                    f"does not exist: {expected} "
                )
                block.lines.append(f"// {message}")
                self.logger.warning(message.rstrip())
                registry.mark_unresolved(base)
                block.unresolved_bases.append(base)
                continue
            block.lines.append(f'import {{ {symbol} }} from "./{base}{GENERATED_SUFFIX}";')
            block.imported.append(symbol)


def _distinct_references(descriptors: Iterable[TypeDescriptor]) -> List[str]:
    seen: List[str] = []
    for descriptor in descriptors:
        for reference in descriptor.references:
            if reference not in seen:
                seen.append(reference)
    return seen


__all__ = ["ImportBlock", "ImportResolver", "reference_symbol", "relative_import_path", "to_forward_slashes"]
